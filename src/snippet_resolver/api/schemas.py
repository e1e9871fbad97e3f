from __future__ import annotations

from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    text: str = Field(description="Message text to scan for GitHub and Gist links.")


class MatchItem(BaseModel):
    shape: str
    url: str
    opts: str | None = None
    fetch_url: str | None = None


class MatchResponse(BaseModel):
    matches: list[MatchItem]


class HealthResponse(BaseModel):
    status: str = "ok"
