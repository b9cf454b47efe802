"""Local filesystem storage for client photos.

Files land flat in ``<upload_dir>/<uuid>_<original name>`` and are served
back by ``uploads.controller`` under the configured URL prefix.
"""

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO

from werkzeug.utils import secure_filename

from ..core.exceptions import UploadError

logger = logging.getLogger(__name__)


def unique_filename(original_filename: str) -> str:
    return f"{uuid.uuid4().hex}_{secure_filename(original_filename) or 'upload'}"


class LocalPhotoStorage:
    """Infrastructure adapter for photo uploads."""

    def __init__(self, upload_dir: str | Path):
        self._upload_dir = Path(upload_dir).resolve()

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def store(self, stream: BinaryIO, original_filename: str) -> str:
        """Copy ``stream`` into the upload directory and return the stored filename."""
        filename = unique_filename(original_filename)
        dest_path = self._upload_dir / filename
        logger.info("Storing upload %r as %s", original_filename, dest_path)
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            out = open(dest_path, "xb")
        except OSError as e:
            raise UploadError(f"No se pudo guardar '{original_filename}': {e}") from e

        try:
            with out:
                shutil.copyfileobj(stream, out)
        except OSError as e:
            # No partial uploads left behind.
            dest_path.unlink(missing_ok=True)
            raise UploadError(f"No se pudo guardar '{original_filename}': {e}") from e
        return filename
