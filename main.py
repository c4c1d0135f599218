# =============================================================================
# main.py  —  Entry Point for the RunPod MCP Server
# =============================================================================
#
# HOW TO RUN:
#   RUNPOD_API_KEY=... uv run python main.py
#   (or put RUNPOD_API_KEY in a .env file next to this script)
#
# WHAT HAPPENS:
#   1. Loads .env into the environment (python-dotenv)
#   2. Resolves Settings once (core/config.py)
#        → missing RUNPOD_API_KEY: message on stderr, exit status 1,
#          no tool is ever registered
#   3. Builds one RunPodClient around those settings
#   4. Creates the FastMCP server with every tool (tools/mcp_server.py)
#   5. Serves MCP over stdin/stdout until the client disconnects
#
# CONNECTING FROM AN MCP CLIENT:
#   {
#     "command": "uv",
#     "args": ["run", "python", "/path/to/main.py"],
#     "env": {"RUNPOD_API_KEY": "..."}
#   }
# =============================================================================

import sys

from dotenv import load_dotenv

from core.client import RunPodClient
from core.config import ConfigError, load_settings

EXIT_CONFIG_ERROR = 1


def main() -> None:
    """Resolve configuration, then serve RunPod tools over stdio."""
    load_dotenv()

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    # Imported here so logging is only configured once we know we will serve.
    from tools.mcp_server import create_server

    with RunPodClient(settings) as client:
        create_server(client).run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
