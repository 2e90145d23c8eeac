"""Base client module for Jira Cloud API interactions."""

import logging
from typing import Any

import requests
from atlassian import Jira

from .config import JiraConfig
from .constants import API_ROOT

logger = logging.getLogger("mcp-jira-cloud.jira")


class JiraClient:
    """Base client for Jira Cloud API interactions."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            MCPJiraConfigurationError: If configuration is missing.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        self.jira = Jira(
            url=self.config.url,
            session=self._build_session(),
            cloud=True,
            verify_ssl=self.config.ssl_verify,
            # Non-2xx responses, 429 included, go straight back to the caller
            backoff_and_retry=False,
            retry_with_header=False,
        )

    def _build_session(self) -> requests.Session:
        """Create the HTTP session carrying the fixed header set."""
        session = requests.Session()
        session.headers.update(self.headers)
        return session

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Authorization": self.config.auth_header,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _api_path(self, resource: str) -> str:
        return f"{API_ROOT}/{resource}"

    def _get(
        self, resource: str, action: str, params: dict[str, Any] | None = None
    ) -> Any:
        """Issue one GET against the v3 API and return the decoded body.

        Args:
            resource: Path below ``rest/api/3``
            action: Human readable description used in the error log
            params: Optional query parameters

        Returns:
            The decoded JSON body

        Raises:
            requests.RequestException: Propagated unchanged on any failure
        """
        try:
            return self.jira.get(self._api_path(resource), params=params)
        except Exception as e:
            logger.error(f"Error {action}: {str(e)}")
            raise

    def _post(self, resource: str, action: str, data: dict[str, Any]) -> Any:
        """Issue one POST against the v3 API and return the decoded body."""
        try:
            return self.jira.post(self._api_path(resource), data=data)
        except Exception as e:
            logger.error(f"Error {action}: {str(e)}")
            raise
