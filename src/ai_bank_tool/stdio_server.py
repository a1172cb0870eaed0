"""
stdio MCP server: the AI bank tools over stdin/stdout for a single client.

Logs go to the rotating file (and stderr for warnings), never to stdout.
"""

from ai_bank_tool.logging_config import get_logger, setup_logging
from ai_bank_tool.tools import create_server

logger = get_logger("ai_bank_tool.stdio")


def main():
    setup_logging()
    mcp = create_server()
    logger.info("Starting MCP stdio server %s", mcp.name)
    mcp.run(transport="stdio", show_banner=False)


if __name__ == "__main__":
    main()
