from __future__ import annotations

import logging

from flask import Flask, send_from_directory

from ..container import Container
from ..core.constants import DEFAULT_UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    prefix = "/" + str(app.config.get("UPLOAD_URL_PREFIX", DEFAULT_UPLOAD_URL_PREFIX)).strip("/")
    upload_dir = container.photo_storage.upload_dir
    logger.info("Serving %s/** from %s", prefix, upload_dir)

    @app.route(f"{prefix}/<path:filename>", endpoint="uploads")
    def uploads(filename: str):
        return send_from_directory(upload_dir, filename)
