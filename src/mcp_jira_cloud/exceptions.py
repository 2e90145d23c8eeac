class MCPJiraError(Exception):
    """Base exception for MCP Jira Cloud errors."""

    pass


class MCPJiraConfigurationError(MCPJiraError, ValueError):
    """Raised when required Jira configuration is missing or invalid."""

    pass


class MCPJiraNotFoundError(MCPJiraError):
    """Raised when a requested Jira entity does not exist."""

    pass


class MCPJiraInvalidArgumentError(MCPJiraError, ValueError):
    """Raised when a tool or prompt argument is missing or empty."""

    pass


class MCPJiraUnknownOperationError(MCPJiraError, ValueError):
    """Raised for an unrecognized tool or prompt name."""

    pass
