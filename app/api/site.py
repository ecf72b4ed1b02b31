from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from app.core.config import Settings
from app.core.dependencies import get_settings

router = APIRouter()

INDEX_FILE = "index.html"
# Legacy asset URLs that map onto the static root itself.
ASSET_ALIASES = ("css/", "js/", "images/")


def resolve_static_file(static_dir: Path, path: str) -> Path | None:
    """Map a request path to a file under static_dir, or None."""
    candidates = [path]
    for alias in ASSET_ALIASES:
        if path.startswith(alias):
            candidates.append(path[len(alias) :])
    root = static_dir.resolve()
    for candidate in candidates:
        if not candidate:
            continue
        target = (root / candidate).resolve()
        if not target.is_relative_to(root):
            continue
        if target.is_file():
            return target
    return None


@router.api_route("/{path:path}", methods=["GET", "HEAD"], include_in_schema=False)
def site(path: str, settings: Settings = Depends(get_settings)):  # noqa: B008
    """Serve a static asset, otherwise the single-page index document."""
    target = resolve_static_file(settings.static_dir, path)
    if target is not None:
        return FileResponse(target)
    index = settings.static_dir / INDEX_FILE
    if index.is_file():
        return FileResponse(index, media_type="text/html")
    return JSONResponse(status_code=404, content={"success": False, "message": "Not found"})
