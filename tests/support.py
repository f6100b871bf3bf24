# -*- coding: utf-8 -*-
"""
backend/tests/support.py

Utilidades compartidas por los tests (payloads base64, optimizador falso,
inspección del almacenamiento).
"""

import base64
from typing import List, Optional

from showcase.shared.results import Result, bad_request, ok
from showcase.shared.storage import LocalFileStorage

PNG_BYTES = b"\x89PNG\r\n\x1a\n-fake-image-payload"


def b64(data: bytes = PNG_BYTES) -> str:
    """Codifica bytes como viajan en el JSON de la API."""
    return base64.b64encode(data).decode("ascii")


class FakeOptimizer:
    """Optimizador en memoria: antepone 'tiny:' o falla si fail=True."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: List[bytes] = []

    async def optimise(self, data: bytes) -> Result[bytes]:
        self.calls.append(data)
        if self.fail:
            return bad_request("The image could not be optimised.")
        return ok(b"tiny:" + data)


def stored_files(storage: LocalFileStorage) -> List[str]:
    """Nombres de archivo presentes en el almacenamiento."""
    if not storage.base_dir.exists():
        return []
    return sorted(p.name for p in storage.base_dir.iterdir())


def file_on_disk(storage: LocalFileStorage, name: Optional[str]) -> bool:
    return bool(name) and storage.path_for(name).is_file()
