from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint."""
    return {
        "meta": {
            "title": "Snippet Resolver API",
            "description": "Resolve GitHub and Gist links into bounded code excerpts.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "match": "/match",
            "resolve": "/resolve",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
