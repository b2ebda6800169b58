"""Configuration module for Jira API interactions."""

from dataclasses import dataclass

from ..exceptions import ConfigurationError
from ..utils.env import getenv_first, is_env_ssl_verify


@dataclass
class JiraConfig:
    """Jira Server/Data Center API configuration.

    Authentication is always a personal access token sent as a bearer token.
    """

    url: str  # Base URL for Jira, without trailing slash
    personal_token: str  # Personal access token
    ssl_verify: bool = True  # Whether to verify SSL certificates

    def __post_init__(self) -> None:
        if self.url.endswith("/"):
            self.url = self.url[:-1]

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Reads JIRA_BASE_URL (or JIRA_URL), PAT (or JIRA_PERSONAL_TOKEN) and
        JIRA_SSL_VERIFY.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ConfigurationError: If the base URL or the token is missing
        """
        url = getenv_first("JIRA_BASE_URL", "JIRA_URL")
        personal_token = getenv_first("PAT", "JIRA_PERSONAL_TOKEN")

        missing = []
        if not url:
            missing.append("JIRA_BASE_URL")
        if not personal_token:
            missing.append("PAT")
        if missing:
            msg = f"Missing required environment variables: {' and '.join(missing)}"
            raise ConfigurationError(msg)

        return cls(
            url=url,
            personal_token=personal_token,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
        )
