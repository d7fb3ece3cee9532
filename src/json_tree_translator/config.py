"""BatchConfig and ProviderConfig for the translation pipeline.

Both are frozen (immutable) dataclasses validated on construction.
``BatchConfig`` governs rate control of a batch; ``ProviderConfig`` holds
the backend endpoints and per-call timeout.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

__all__ = [
    "DEFAULT_FALLBACK_URL",
    "DEFAULT_PRIMARY_URL",
    "BatchConfig",
    "ProviderConfig",
]

DEFAULT_PRIMARY_URL = "https://libretranslate.de/translate"
DEFAULT_FALLBACK_URL = "https://api.mymemory.translated.net/get"

_ENV_PREFIX = "JSON_TRANSLATOR_"


@dataclass(frozen=True, slots=True)
class BatchConfig:
    """Immutable rate-control settings for ``BatchTranslator``.

    Attributes:
        chunk_size: Maximum number of requests in flight at once (>= 1).
        inter_chunk_delay_ms: Pause between two chunks in milliseconds (>= 0).
            No pause follows the last chunk.
        max_attempts: Provider attempts per string before the placeholder is
            used (>= 1).  The default of 1 means no caller-side retry.
    """

    chunk_size: int = 5
    inter_chunk_delay_ms: int = 1000
    max_attempts: int = 1

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            msg = f"chunk_size must be >= 1, got {self.chunk_size}"
            raise ValueError(msg)
        if self.inter_chunk_delay_ms < 0:
            msg = f"inter_chunk_delay_ms must be >= 0, got {self.inter_chunk_delay_ms}"
            raise ValueError(msg)
        if self.max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {self.max_attempts}"
            raise ValueError(msg)

    @property
    def inter_chunk_delay(self) -> float:
        """The inter-chunk delay in seconds."""
        return self.inter_chunk_delay_ms / 1000.0


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Immutable endpoint settings for ``FallbackTranslationProvider``.

    The API key (sent to the primary backend only) is excluded from
    ``repr()`` so it never leaks into logs or tracebacks.

    Attributes:
        primary_url: LibreTranslate-compatible ``/translate`` endpoint.
        fallback_url: MyMemory-compatible ``/get`` endpoint.
        timeout: Upper bound in seconds for one backend call (> 0).
        api_key: Optional LibreTranslate API key.
    """

    primary_url: str = DEFAULT_PRIMARY_URL
    fallback_url: str = DEFAULT_FALLBACK_URL
    timeout: float = 10.0
    api_key: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = f"timeout must be > 0, got {self.timeout}"
            raise ValueError(msg)
        for name in ("primary_url", "fallback_url"):
            url = getattr(self, name)
            if not url.startswith(("http://", "https://")):
                msg = f"{name} must be an http(s) URL, got {url!r}"
                raise ValueError(msg)

    @classmethod
    def from_env(cls) -> ProviderConfig:
        """Build a config from ``JSON_TRANSLATOR_*`` environment variables.

        Unset variables keep their defaults.  Recognised variables are
        ``JSON_TRANSLATOR_PRIMARY_URL``, ``JSON_TRANSLATOR_FALLBACK_URL``,
        ``JSON_TRANSLATOR_TIMEOUT`` and ``JSON_TRANSLATOR_API_KEY``.

        Raises:
            ValueError: If ``JSON_TRANSLATOR_TIMEOUT`` is not a number or any
                value fails validation.
        """
        env = os.environ
        timeout_raw = env.get(f"{_ENV_PREFIX}TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else 10.0
        except ValueError:
            msg = f"{_ENV_PREFIX}TIMEOUT must be a number, got {timeout_raw!r}"
            raise ValueError(msg) from None
        return cls(
            primary_url=env.get(f"{_ENV_PREFIX}PRIMARY_URL", DEFAULT_PRIMARY_URL),
            fallback_url=env.get(f"{_ENV_PREFIX}FALLBACK_URL", DEFAULT_FALLBACK_URL),
            timeout=timeout,
            api_key=env.get(f"{_ENV_PREFIX}API_KEY") or None,
        )
