"""Package-wide defaults for rate lookups and aggregation."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = [
    "ACCEPTABLE_RETRIEVAL_FAILURE_FRACTION",
    "CACHE_SUFFIX",
    "DEFAULT_CACHE_DIR",
    "EXCHANGE_URL",
    "REQUEST_TIMEOUT_SECONDS",
]

EXCHANGE_URL: Final[str] = "https://api.exchangeratesapi.io/"

REQUEST_TIMEOUT_SECONDS: Final[int] = 10

# Above this fraction of business days without a rate the whole run fails;
# below it the summary is still produced but carries a notice.
ACCEPTABLE_RETRIEVAL_FAILURE_FRACTION: Final[float] = 0.05

# Cache files land in the working directory unless told otherwise.
DEFAULT_CACHE_DIR: Final[Path] = Path(".")

CACHE_SUFFIX: Final[str] = ".cached"
