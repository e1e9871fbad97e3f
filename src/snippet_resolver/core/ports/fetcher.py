import json
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class FetchResponse:
    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return json.loads(self.text)


class ContentFetcher(Protocol):
    async def fetch(self, url: str) -> FetchResponse | None: ...

    async def aclose(self) -> None: ...
