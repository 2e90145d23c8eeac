"""
Test fixtures for Jira unit tests.

The Atlassian REST client is always replaced by a MagicMock, so no test in
this package touches the network.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira_cloud.jira import JiraFetcher
from mcp_jira_cloud.jira.config import JiraConfig
from tests.utils.factories import AuthConfigFactory, JiraIssueFactory

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Example:
        def test_config(jira_config_factory):
            config = jira_config_factory(domain="custom.atlassian.net")
            assert config.url == "https://custom.atlassian.net"
    """

    def _create_config(**overrides):
        return JiraConfig(**AuthConfigFactory.create_basic_auth_config(**overrides))

    return _create_config


@pytest.fixture
def mock_config(jira_config_factory):
    """Standard JiraConfig for tests that don't need custom configuration."""
    return jira_config_factory()


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def jira_auth_environment():
    """Environment with the three required Jira Cloud variables set."""
    jira_env = AuthConfigFactory.create_env()

    with patch.dict(os.environ, jira_env, clear=False):
        yield jira_env


@pytest.fixture
def clean_jira_environment():
    """Environment with every Jira variable removed."""
    names = ["JIRA_DOMAIN", "JIRA_EMAIL", "JIRA_API_TOKEN", "JIRA_SSL_VERIFY"]
    saved = {name: os.environ.pop(name) for name in names if name in os.environ}
    try:
        yield
    finally:
        os.environ.update(saved)


# ============================================================================
# Mock Atlassian Client Fixtures
# ============================================================================


@pytest.fixture
def mock_atlassian_jira():
    """
    Mock of the Atlassian Jira client.

    ``get`` answers the search endpoint with three issues by default;
    tests override ``return_value``/``side_effect`` for other endpoints.
    """
    mock_jira = MagicMock()
    mock_jira.get.return_value = {
        "issues": [
            JiraIssueFactory.create("TEST-1"),
            JiraIssueFactory.create("TEST-2"),
            JiraIssueFactory.create("TEST-3"),
        ],
        "total": 3,
        "startAt": 0,
        "maxResults": 50,
    }
    mock_jira.post.return_value = {
        "id": "10001",
        "key": "TEST-124",
        "self": "https://test.atlassian.net/rest/api/3/issue/10001",
    }
    return mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """JiraFetcher whose Atlassian client is a mock."""
    with patch("mcp_jira_cloud.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira
        yield JiraFetcher(config=mock_config)
