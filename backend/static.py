"""
backend/static.py
-----------------
Static asset host for the built client.

Serves files from the build directory (with ETag / Last-Modified
revalidation and HEAD support) and falls back to index.html for any other
path, so client-side routes resolve on refresh. When index.html is missing
as well the response is a JSON 404.
"""

from __future__ import annotations

import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from core.config import static_max_age

INDEX_FILE = "index.html"


class ClientStaticFiles(StaticFiles):
    """StaticFiles with an index.html fallback and a fixed Cache-Control."""

    def __init__(self, *, directory: str | os.PathLike, max_age: int):
        super().__init__(directory=directory)
        self.cache_control = f"public, max-age={max_age}"

    async def _lookup(self, path: str, scope: Scope) -> Response | None:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            return None
        return None if response.status_code == 404 else response

    async def get_response(self, path: str, scope: Scope) -> Response:
        response = await self._lookup(path, scope)
        if response is None:
            response = await self._lookup(INDEX_FILE, scope)
        if response is None:
            return JSONResponse(status_code=404, content={"message": "Not found"})
        response.headers["Cache-Control"] = self.cache_control
        return response


def serve_static(app: FastAPI, dist_path: str | os.PathLike) -> None:
    """
    Mount the built client at "/" on `app`.

    Must be called after all API routes, since the mount matches every path.
    """
    dist = Path(dist_path).resolve()
    if not dist.is_dir():
        raise RuntimeError(
            f"Could not find the build directory: {dist}, make sure to build the client first"
        )

    app.mount("/", ClientStaticFiles(directory=dist, max_age=static_max_age()), name="client")
