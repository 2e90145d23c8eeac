"""Entry point for running the MCP Jira Cloud server with ``python -m``."""

from . import main

if __name__ == "__main__":
    main()
