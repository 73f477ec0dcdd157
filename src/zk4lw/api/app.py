"""FastAPI application factory for zk4lw."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zk4lw import __version__
from zk4lw.api.routes import servers


def create_app() -> FastAPI:
    app = FastAPI(
        title="zk4lw",
        version=__version__,
        description="ZooKeeper four-letter-word commands over HTTP",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["meta"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(servers.router, prefix="/api")

    return app


app = create_app()
