"""Module for Jira field and field configuration operations."""

import logging
from typing import Any

from .client import JiraClient

logger = logging.getLogger("mcp-jira-cloud.jira")


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations."""

    def get_field_configurations(self) -> Any:
        return self._get("fieldconfiguration", "fetching field configurations")

    def get_field_configuration_schemes(self) -> Any:
        return self._get(
            "fieldconfigurationscheme", "fetching field configuration schemes"
        )

    def get_custom_fields(self) -> list[dict[str, Any]]:
        """
        Get the custom fields defined on the site.

        Returns:
            Entries of the field list flagged as ``custom``

        Raises:
            requests.RequestException: If the field request fails
        """
        fields = self._get("field", "fetching custom fields")
        custom_fields = [field for field in fields if field.get("custom")]
        logger.debug(f"Found {len(custom_fields)} custom fields of {len(fields)}")
        return custom_fields
