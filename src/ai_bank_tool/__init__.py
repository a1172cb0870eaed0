"""
ai_bank_tool

Mock bank tools exposed over MCP:
- tools.py: register_tools() binds the nine bank tools to a FastMCP server
- mcp_server.py: FastAPI app serving streamable HTTP (+ health, CORS)
- stdio_server.py: the same tools over stdio
"""

__version__ = "0.1.0"
