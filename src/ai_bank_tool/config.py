"""
Runtime configuration for the AI bank tool server.

Values are read once from the environment (and an optional .env file).
"""

import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)

SERVER_NAME = "ai-bank-tool"

MCP_HOST = os.getenv("MCP_HOST", "0.0.0.0")
MCP_PORT = int(os.getenv("PORT", "8080"))
MCP_PATH = os.getenv("MCP_PATH", "/mcp")

# Gateway-compatible alias for MCP_PATH
MCP_RPC_PATH = MCP_PATH.rstrip("/") + "/rpc"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
