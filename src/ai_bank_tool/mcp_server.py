"""
Streamable HTTP MCP server
--------------------------
FastAPI application serving the AI bank tools over MCP.

Endpoints:
 - POST/GET/DELETE /mcp      streamable HTTP (JSON responses, Mcp-Session-Id)
 - POST/GET/DELETE /mcp/rpc  alias of /mcp for gateways that expect it
 - GET /health, /mcp/health  liveness probes

Every tool call is logged with its timing (start / ok / error).
"""

import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from ai_bank_tool import __version__, config
from ai_bank_tool.logging_config import get_logger, setup_logging
from ai_bank_tool.tools import create_server

logger = get_logger("ai_bank_tool.http")

SESSION_ID_HEADER = "Mcp-Session-Id"


class PathAliasMiddleware:
    """
    Rewrites alias paths onto the MCP endpoint so both reach the same
    session manager.
    """

    def __init__(self, app: ASGIApp, aliases: list[str], target: str):
        self.app = app
        self.aliases = {a.rstrip("/") for a in aliases}
        self.target = target

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].rstrip("/") in self.aliases:
            scope = dict(scope, path=self.target, raw_path=self.target.encode())
        await self.app(scope, receive, send)


def create_app() -> FastAPI:
    mcp = create_server(tool_logging=True)
    mcp_app = mcp.http_app(path=config.MCP_PATH, json_response=True)

    # The MCP session manager lives as long as the FastAPI lifespan
    app = FastAPI(title="AI Bank Tool (MCP)", version=__version__, lifespan=mcp_app.lifespan)

    # Browser clients (e.g. MCP Inspector) need to read Mcp-Session-Id
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[SESSION_ID_HEADER],
    )
    app.add_middleware(PathAliasMiddleware, aliases=[config.MCP_RPC_PATH], target=config.MCP_PATH)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Lightweight request logger to trace MCP traffic.
        """
        response = await call_next(request)
        logger.info(
            "HTTP %s %s from %s -> %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "?",
            response.status_code,
        )
        return response

    @app.get("/health")
    async def health():
        return {"ok": True}

    @app.get(config.MCP_PATH.rstrip("/") + "/health")
    async def mcp_health():
        return {"ok": True}

    # Registered last so the health routes above take precedence
    app.mount("/", mcp_app)
    return app


def main():
    setup_logging()
    app = create_app()
    logger.info(
        "MCP (Streamable HTTP) listening on http://%s:%s%s",
        config.MCP_HOST,
        config.MCP_PORT,
        config.MCP_PATH,
    )
    try:
        uvicorn.run(app, host=config.MCP_HOST, port=config.MCP_PORT, log_level=config.LOG_LEVEL.lower())
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
