from __future__ import annotations

import logging
import os
from dataclasses import replace

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.pagination import PageRender, check_window_size
from ..container import Container
from ..core.constants import DEFAULT_PAGINATION_WINDOW
from ..core.exceptions import UploadError
from .edit_buffer import EditBuffer
from .forms import ClientForm
from .model import Client

logger = logging.getLogger(__name__)


def _is_empty(stream) -> bool:
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size <= pos


def register(app: Flask, container: Container) -> None:
    service = container.client_service
    storage = container.photo_storage
    window_size = check_window_size(int(app.config.get("PAGINATION_WINDOW", DEFAULT_PAGINATION_WINDOW)))

    def _form_page(client: Client, *, titulo: str, errors=None):
        return render_template("clients/form.html", client=client, errors=errors or {}, titulo=titulo)

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("listar"))

    @app.route("/listar", methods=["GET"], endpoint="listar")
    def listar():
        page_index = request.args.get("page", 0, type=int)
        if page_index < 0:
            return redirect(url_for("listar"))

        page = service.list_page(page_index)
        if page_index > 0 and page_index >= page.total_pages:
            return redirect(url_for("listar", page=page.total_pages - 1))

        page_render = PageRender(url_for("listar"), page, window_size=window_size)
        return render_template(
            "clients/listar.html",
            titulo="Listado de clientes",
            clients=page.items,
            page=page_render,
        )

    @app.route("/form", methods=["GET"], endpoint="crear")
    def crear():
        client = Client()
        EditBuffer(session).hold(client)
        return _form_page(client, titulo="Formulario de cliente")

    @app.route("/form/<int(signed=True):client_id>", methods=["GET"], endpoint="editar")
    def editar(client_id: int):
        if client_id <= 0:
            flash("El ID del cliente no puede ser cero", "danger")
            return redirect(url_for("listar"))

        client = service.get_by_id(client_id)
        if client is None:
            flash("El cliente no existe", "danger")
            return redirect(url_for("listar"))

        EditBuffer(session).hold(client)
        return _form_page(client, titulo="Editar cliente")

    @app.route("/form", methods=["POST"], endpoint="guardar")
    def guardar():
        buffer = EditBuffer(session)
        form = ClientForm.from_mapping(request.form)
        client = form.apply_to(buffer.current() or Client())

        errors = form.validate()
        if errors:
            return _form_page(client, titulo="Formulario de cliente", errors=errors)

        photo = request.files.get("file")
        if photo is not None and photo.filename and not _is_empty(photo.stream):
            try:
                stored = storage.store(photo.stream, photo.filename)
            except UploadError:
                # The client is still saved, keeping its previous photo.
                logger.exception("Photo upload failed for client id=%s", client.id)
            else:
                client = replace(client, photo=stored)
                flash(f"Has subido correctamente '{stored}'", "info")

        message = "Cliente creado con éxito" if client.is_new else "Cliente editado con éxito"
        service.save(client)
        buffer.clear()
        flash(message, "success")
        return redirect(url_for("listar"))

    @app.route("/ver/<int(signed=True):client_id>", methods=["GET"], endpoint="ver")
    def ver(client_id: int):
        client = service.get_by_id(client_id) if client_id > 0 else None
        if client is None:
            flash("El cliente no se encontró en la base de datos", "danger")
            return redirect(url_for("listar"))

        return render_template(
            "clients/ver.html",
            client=client,
            titulo=f"Detalle de cliente: {client.name}",
        )

    @app.route("/eliminar/<int(signed=True):client_id>", methods=["GET"], endpoint="eliminar")
    def eliminar(client_id: int):
        if client_id > 0:
            service.delete_by_id(client_id)
            flash("Cliente eliminado con éxito", "success")
        return redirect(url_for("listar"))
