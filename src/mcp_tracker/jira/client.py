"""Base client module for Jira API interactions."""

import logging
from typing import Any

from atlassian import Jira
from requests import Response

from ..exceptions import TrackerApiError, TrackerAuthenticationError
from .config import JiraConfig
from .constants import API_PATH_PREFIX

logger = logging.getLogger("mcp-tracker.jira")


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from
                environment variables.

        Raises:
            ConfigurationError: If the configuration is loaded from the
                environment and is incomplete.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        # The token becomes an "Authorization: Bearer" session header; the
        # library already sends JSON Content-Type and Accept on every call.
        self.jira = Jira(
            url=self.config.url,
            token=self.config.personal_token,
            cloud=False,
            verify_ssl=self.config.ssl_verify,
        )

        if not self.config.ssl_verify:
            logger.warning(
                f"SSL verification disabled for Jira ({self.config.url}). "
                "This is insecure and should only be used in testing environments."
            )

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        data: Any = None,
    ) -> Any:
        """Send one request to the REST v2 namespace and decode the answer.

        Args:
            method: HTTP method
            path: Endpoint path below /rest/api/2, starting with "/"
            params: Optional query parameters
            data: Optional body, serialized as JSON

        Returns:
            The decoded JSON body, or an empty dict for an empty success body

        Raises:
            TrackerAuthenticationError: If Jira answers 401 or 403
            TrackerApiError: If Jira answers with any other non-2xx status
        """
        logger.debug(f"{method} {API_PATH_PREFIX}{path}")
        response = self.jira.request(
            method=method,
            path=f"{API_PATH_PREFIX}{path}",
            data=data,
            params=params,
            advanced_mode=True,
        )
        return self._handle_response(method, path, response)

    @staticmethod
    def _handle_response(method: str, path: str, response: Response) -> Any:
        status = response.status_code
        if not 200 <= status < 300:
            body = response.text or ""
            if status in (401, 403):
                logger.error(
                    f"Authentication failed for Jira API ({status}) on {method} {path}. "
                    "Token may be expired or invalid. Please verify credentials."
                )
                raise TrackerAuthenticationError(status, body)
            logger.error(f"HTTP error during {method} {path}: {status}")
            raise TrackerApiError(status, body)

        if status == 204 or not response.text:
            return {}
        return response.json()
