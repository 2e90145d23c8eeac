"""Jira Cloud API module for mcp_jira_cloud.

This module provides the JiraFetcher used by the server: one method per
Jira REST operation it proxies.
"""

from .client import JiraClient
from .config import JiraConfig
from .fields import FieldsMixin
from .issues import IssuesMixin
from .schemes import SchemesMixin
from .screens import ScreensMixin
from .search import SearchMixin
from .users import UsersMixin
from .workflows import WorkflowsMixin


class JiraFetcher(
    SearchMixin,
    IssuesMixin,
    SchemesMixin,
    FieldsMixin,
    ScreensMixin,
    WorkflowsMixin,
    UsersMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - SearchMixin: JQL search
    - IssuesMixin: Issue creation
    - SchemesMixin: Permission, notification and security schemes, priorities
    - FieldsMixin: Field configurations and custom fields
    - ScreensMixin: Screens and screen schemes
    - WorkflowsMixin: Workflows, workflow schemes, statuses and transitions
    - UsersMixin: User lookups

    Every method performs exactly one HTTP request.
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
