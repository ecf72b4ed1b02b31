from __future__ import annotations

import logging
from collections.abc import Iterable

STATIC_ASSET_PREFIXES = ("/css/", "/js/", "/images/", "/favicon.ico")


class _StaticAssetFilter(logging.Filter):
    def __init__(self, prefixes: Iterable[str]) -> None:
        super().__init__()
        self._prefixes = tuple(prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        path = _extract_path(record)
        if path and path.startswith(self._prefixes):
            return False
        return True


def _extract_path(record: logging.LogRecord) -> str | None:
    # uvicorn.access args: (client_addr, method, full_path, http_version, status_code)
    args = record.args
    if isinstance(args, tuple) and len(args) >= 3:
        path = str(args[2])
    elif isinstance(args, dict) and "path" in args:
        path = str(args["path"])
    else:
        return None
    return path.split("?", 1)[0] or None


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    access_logger = logging.getLogger("uvicorn.access")
    access_logger.addFilter(_StaticAssetFilter(STATIC_ASSET_PREFIXES))
