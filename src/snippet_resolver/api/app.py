from __future__ import annotations

from fastapi import FastAPI

from snippet_resolver.api.lifespan import lifespan
from snippet_resolver.api.routes.health import router as health_router
from snippet_resolver.api.routes.resolve import router as resolve_router
from snippet_resolver.api.routes.root import router as root_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Snippet Resolver API",
        description="Resolve GitHub and Gist links into bounded code excerpts.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(resolve_router)

    return app
