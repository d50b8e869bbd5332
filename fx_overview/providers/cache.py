"""File backed cache holding one exchange rate per file."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from fx_overview.config import CACHE_SUFFIX, DEFAULT_CACHE_DIR
from fx_overview.exceptions import CacheCorruptError, CacheWriteError
from fx_overview.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CacheKey:
    currency_from: str
    currency_to: str
    rate_date: date

    @property
    def filename(self) -> str:
        return f"{self.currency_from}_{self.currency_to}_{self.rate_date.isoformat()}{CACHE_SUFFIX}"


class RateCache:
    """Stale-forever cache keyed by currency pair and date.

    Entries are written once after a successful fetch and never refreshed.
    A file whose content is not a float is reported as corrupt rather than
    treated as a miss.
    """

    def __init__(self, cache_dir: str | Path = DEFAULT_CACHE_DIR) -> None:
        self.cache_dir = Path(cache_dir).expanduser()

    def path_for(self, key: CacheKey) -> Path:
        return self.cache_dir / key.filename

    def get(self, key: CacheKey) -> float | None:
        """Return the cached rate or ``None`` when no file exists for ``key``."""

        path = self.path_for(key)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheCorruptError(f"cannot read cache file: {path} {exc}") from exc
        return _parse_rate(text, path)

    def put(self, key: CacheKey, value: float) -> Path:
        """Persist ``value`` as plain decimal text and return the file path."""

        path = self.path_for(key)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(repr(float(value)), encoding="utf-8")
        except OSError as exc:
            raise CacheWriteError(f"cannot write cache file: {path} {exc}") from exc
        LOGGER.debug("Cached %s in %s", value, path)
        return path

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, CacheKey):
            return False
        try:
            return self.path_for(key).is_file()
        except OSError:
            return False


def _parse_rate(text: str, path: Path) -> float:
    # only the bare decimal text written by ``put`` is accepted
    if text != text.strip() or "_" in text:
        raise CacheCorruptError(f"cannot parse cached rate value: {path} {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise CacheCorruptError(f"cannot parse cached rate value: {path} {exc}") from exc


__all__ = ["CacheKey", "RateCache"]
