"""URL-related utility functions for MCP Jira Cloud."""

from urllib.parse import urlparse


def normalize_domain(domain: str) -> str:
    """Reduce a configured Jira domain to its bare host.

    Accepts either ``your-domain.atlassian.net`` or a full URL such as
    ``https://your-domain.atlassian.net/``.

    Args:
        domain: The configured domain value

    Returns:
        The host name (with port, if one was given)
    """
    domain = domain.strip()
    if "://" in domain:
        return urlparse(domain).netloc
    return domain.rstrip("/")
