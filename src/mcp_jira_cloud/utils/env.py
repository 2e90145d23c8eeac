"""Environment variable utility functions for MCP Jira Cloud."""

import os


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def get_required_env(names: list[str]) -> tuple[dict[str, str], list[str]]:
    """Collect required environment variables.

    Blank values count as missing.

    Args:
        names: Names of the environment variables to read

    Returns:
        A tuple of (values found, names missing)
    """
    found: dict[str, str] = {}
    missing: list[str] = []
    for name in names:
        value = os.getenv(name, "").strip()
        if value:
            found[name] = value
        else:
            missing.append(name)
    return found, missing
