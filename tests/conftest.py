"""Pytest fixtures for testing"""

import pytest
from fastmcp import Client
from fastmcp import FastMCP

from ai_bank_tool.tools import create_server


@pytest.fixture
def server() -> FastMCP:
    """Bank tool server without call logging (stdio flavour)"""
    return create_server()


@pytest.fixture
def logged_server() -> FastMCP:
    """Bank tool server with per-call logging (HTTP flavour)"""
    return create_server(tool_logging=True)


@pytest.fixture
async def client(server: FastMCP):
    """In-memory MCP client connected to the server"""
    async with Client(server) as c:
        yield c


@pytest.fixture
def transfer_args() -> dict:
    return {
        "userId": "user-001",
        "fromAccountId": "ACC-001",
        "toPayeeId": "P-0001",
        "amountJPY": 10000,
    }


@pytest.fixture
def term_deposit_args() -> dict:
    return {
        "userId": "user-001",
        "fromAccountId": "ACC-001",
        "amountJPY": 300000,
        "termMonths": 12,
    }
