import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import log_operation, setup_logger

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default=lambda: os.getenv("MCP_TRANSPORT", "stdio"),
    help="Transport type (stdio or sse)",
)
@click.option(
    "--port",
    type=int,
    default=lambda: int(os.getenv("MCP_PORT", "8000")),
    help="Port to listen on for SSE transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-domain",
    help="Jira Cloud domain (e.g., your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    jira_domain: str | None,
    jira_email: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool,
) -> None:
    """MCP Jira Cloud Server - Jira Cloud issues and configuration for MCP

    Requires JIRA_DOMAIN, JIRA_EMAIL and JIRA_API_TOKEN, from the
    environment, a .env file or the matching command line options.
    """
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="mcp-jira-cloud",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        if jira_domain:
            os.environ["JIRA_DOMAIN"] = jira_domain
        if jira_email:
            os.environ["JIRA_EMAIL"] = jira_email
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if log_dir:
            os.environ["LOG_DIR"] = log_dir
        if not jira_ssl_verify:
            os.environ["JIRA_SSL_VERIFY"] = "false"

    from .exceptions import MCPJiraConfigurationError
    from .jira.config import JiraConfig

    try:
        JiraConfig.from_env()
    except MCPJiraConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    from . import server

    logger.info(f"Starting MCP Jira Cloud v{__version__} with {transport} transport")
    asyncio.run(server.run_server(transport=transport, port=port))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
