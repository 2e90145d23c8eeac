"""Configuration module for Jira Cloud API interactions."""

import base64
from dataclasses import dataclass

from ..exceptions import MCPJiraConfigurationError
from ..utils import get_required_env, is_env_ssl_verify, normalize_domain

REQUIRED_ENV_VARS = ["JIRA_DOMAIN", "JIRA_EMAIL", "JIRA_API_TOKEN"]


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Captured once at startup and never modified afterwards. Authentication
    is always HTTP Basic with the account email and an API token.
    """

    domain: str  # Jira Cloud host, e.g. your-domain.atlassian.net
    email: str  # Account email
    api_token: str  # API token for the account
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @property
    def url(self) -> str:
        """Base URL for all REST calls."""
        return f"https://{self.domain}"

    @property
    def auth_header(self) -> str:
        """Value of the Authorization header sent on every call."""
        credentials = f"{self.email}:{self.api_token}".encode()
        return f"Basic {base64.b64encode(credentials).decode('ascii')}"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            MCPJiraConfigurationError: If any required variable is missing
        """
        values, missing = get_required_env(REQUIRED_ENV_VARS)
        if missing:
            error_msg = (
                f"Missing required environment variables: {', '.join(missing)}"
            )
            raise MCPJiraConfigurationError(error_msg)

        return cls(
            domain=normalize_domain(values["JIRA_DOMAIN"]),
            email=values["JIRA_EMAIL"],
            api_token=values["JIRA_API_TOKEN"],
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
        )
