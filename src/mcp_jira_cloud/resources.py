"""Builders for the MCP content blocks returned by the server."""

import json
from typing import Any
from urllib.parse import urlparse

from mcp.types import EmbeddedResource, Resource, TextResourceContents

from .exceptions import MCPJiraInvalidArgumentError

JSON_MIME_TYPE = "application/json"
URI_PREFIX = "jira:///"


def jira_uri(path: str) -> str:
    """Build a ``jira:///`` URI for an issue key or a synthetic collection path."""
    return f"{URI_PREFIX}{path}"


def issue_key_from_uri(uri: Any) -> str:
    """Extract the issue key from a ``jira:///KEY`` resource URI.

    Raises:
        MCPJiraInvalidArgumentError: If the URI carries no issue key
    """
    path = urlparse(str(uri)).path
    issue_key = path[1:] if path.startswith("/") else path
    if not issue_key:
        raise MCPJiraInvalidArgumentError(f"Invalid resource URI: {uri}")
    return issue_key


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def json_resource(uri: str, data: Any) -> EmbeddedResource:
    """Wrap a Jira payload as an embedded JSON resource block."""
    return EmbeddedResource(
        type="resource",
        resource=TextResourceContents(
            uri=uri,
            mimeType=JSON_MIME_TYPE,
            text=to_json(data),
        ),
    )


def issue_resource(issue: dict[str, Any]) -> Resource:
    """Describe a search hit as a listable resource."""
    key = issue["key"]
    summary = issue["fields"]["summary"]
    return Resource(
        uri=jira_uri(key),
        mimeType=JSON_MIME_TYPE,
        name=summary,
        description=f"{key} - {summary}",
    )
