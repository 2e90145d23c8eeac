"""
Utility functions for the MCP Jira Cloud integration.
"""

from .env import get_required_env, is_env_ssl_verify
from .urls import normalize_domain

__all__ = [
    "get_required_env",
    "is_env_ssl_verify",
    "normalize_domain",
]
