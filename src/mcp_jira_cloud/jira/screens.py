"""Module for Jira screen operations."""

from typing import Any

from .client import JiraClient


class ScreensMixin(JiraClient):
    """Mixin for Jira screens and screen schemes."""

    def get_screens(self) -> Any:
        return self._get("screens", "fetching screens")

    def get_screen_schemes(self) -> Any:
        return self._get("screenscheme", "fetching screen schemes")

    def get_issue_type_screen_schemes(self) -> Any:
        return self._get(
            "issuetypescreenscheme", "fetching issue type screen schemes"
        )
