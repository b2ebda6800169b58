import asyncio
import os
import sys

import click
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .jira.config import JiraConfig
from .logging_config import log_operation, setup_logger

__version__ = "0.1.0"

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default="stdio",
    help="Transport type (stdio or sse)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--read-only/--no-read-only",
    default=None,
    help="Hide and reject tools that modify Jira",
)
@click.option(
    "--jira-url",
    help="Jira base URL (e.g., https://jira.your-company.com)",
)
@click.option(
    "--jira-personal-token",
    help="Jira Personal Access Token",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira Server/Data Center (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    read_only: bool | None,
    jira_url: str | None,
    jira_personal_token: str | None,
    jira_ssl_verify: bool,
) -> None:
    """MCP Tracker Server - Jira Server/Data Center functionality for MCP."""
    logging_level = "DEBUG" if verbose >= 2 else "INFO"
    if verbose == 0 and os.getenv("LOG_LEVEL"):
        logging_level = os.environ["LOG_LEVEL"]

    setup_logger(
        name="mcp-tracker",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        if jira_url:
            os.environ["JIRA_BASE_URL"] = jira_url
        if jira_personal_token:
            os.environ["PAT"] = jira_personal_token
        if log_dir:
            os.environ["LOG_DIR"] = log_dir
        if read_only is not None:
            os.environ["READ_ONLY_MODE"] = str(read_only).lower()
        if not jira_ssl_verify:
            os.environ["JIRA_SSL_VERIFY"] = "false"

        # Missing configuration stops the process before anything is served.
        try:
            JiraConfig.from_env()
        except ConfigurationError as e:
            logger.error(str(e))
            sys.exit(1)

        from . import server

        logger.info(f"Starting MCP Tracker v{__version__} with {transport} transport")

    asyncio.run(server.run_server(transport=transport, port=port))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
