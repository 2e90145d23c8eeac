"""
Atlassian Document Format (ADF) utilities.

Jira Cloud's v3 API expects rich text fields such as ``description`` as
ADF documents rather than plain strings.
"""

from typing import Any

ADF_VERSION = 1


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Wrap plain text in a minimal ADF document.

    The text becomes a single text node inside a single paragraph; no
    markup is interpreted.

    Args:
        text: Plain text content

    Returns:
        ADF document dict
    """
    return {
        "type": "doc",
        "version": ADF_VERSION,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }
