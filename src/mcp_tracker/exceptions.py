class MCPTrackerError(Exception):
    """Base exception for MCP-Tracker errors."""

    pass


class ConfigurationError(MCPTrackerError):
    """Raised when required configuration is missing or invalid."""

    pass


class TrackerApiError(MCPTrackerError):
    """Raised when the Jira REST API answers with a non-success status.

    The raw response body is kept as-is; it is never parsed into a
    structured Jira error.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Jira API error ({status_code}): {body}")


class TrackerAuthenticationError(TrackerApiError):
    """Raised when Jira API authentication fails (401/403)."""

    pass
