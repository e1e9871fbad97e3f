import os
from dataclasses import dataclass

_DEFAULT_USER_AGENT = "snippet-resolver (+https://github.com)"


@dataclass(frozen=True)
class Settings:
    http_timeout: float = 10.0
    user_agent: str = _DEFAULT_USER_AGENT


def get_settings() -> Settings:
    raw_timeout = os.getenv("SNIPPET_RESOLVER_HTTP_TIMEOUT", "10")
    try:
        http_timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"SNIPPET_RESOLVER_HTTP_TIMEOUT must be a number of seconds, got '{raw_timeout}'") from None
    return Settings(
        http_timeout=http_timeout,
        user_agent=os.getenv("SNIPPET_RESOLVER_USER_AGENT", _DEFAULT_USER_AGENT),
    )
