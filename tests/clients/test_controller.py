from __future__ import annotations

import io
from datetime import datetime

import pytest

from client_records.clients.service import ClientService
from client_records.container import Container
from client_records.core.constants import EDIT_BUFFER_SESSION_KEY
from client_records.core.exceptions import UploadError
from client_records.main import create_app
from client_records.uploads.storage import LocalPhotoStorage


def _seed(repo, n: int) -> None:
    for i in range(1, n + 1):
        repo.add(name=f"Name{i:02d}", surname=f"Surname{i:02d}", email=f"c{i}@example.com")


VALID = {"name": "Ada", "surname": "Lovelace", "email": "ada@example.com"}


# ---- list ----

def test_index_redirects_to_list(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/listar")


def test_list_renders_requested_page(client, clients_repo):
    _seed(clients_repo, 12)

    resp = client.get("/listar?page=1")

    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Listado de clientes" in body
    assert "Name06" in body and "Name10" in body
    assert "Name05" not in body and "Name11" not in body
    assert "/listar?page=2" in body


def test_list_defaults_to_first_page(client, clients_repo):
    _seed(clients_repo, 7)

    body = client.get("/listar").get_data(as_text=True)

    assert "Name01" in body and "Name05" in body
    assert "Name06" not in body


def test_list_with_no_clients(client):
    resp = client.get("/listar")
    assert resp.status_code == 200
    assert "No hay clientes registrados" in resp.get_data(as_text=True)


def test_negative_page_redirects_to_list(client):
    resp = client.get("/listar?page=-2")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/listar")


def test_page_past_the_end_redirects_to_last_page(client, clients_repo):
    _seed(clients_repo, 12)

    resp = client.get("/listar?page=9")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/listar?page=2")


@pytest.mark.parametrize("window", [0, -3, 4])
def test_bad_pagination_window_fails_at_startup(monkeypatch, container, window):
    monkeypatch.setenv("APP_ENV", "testing")

    with pytest.raises(ValueError, match="window_size"):
        create_app(container, PAGINATION_WINDOW=window)


# ---- new / edit form ----

def test_new_form_holds_empty_client_in_session(client):
    resp = client.get("/form")

    assert resp.status_code == 200
    assert "Formulario de cliente" in resp.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert sess[EDIT_BUFFER_SESSION_KEY]["id"] is None


@pytest.mark.parametrize("bad_id", [0, -1, -25])
def test_edit_form_with_non_positive_id_does_not_query_store(client, clients_repo, flashes, bad_id):
    resp = client.get(f"/form/{bad_id}")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/listar")
    assert clients_repo.calls == []
    assert flashes() == [("danger", "El ID del cliente no puede ser cero")]


def test_edit_form_for_missing_client_redirects_with_error(client, flashes):
    resp = client.get("/form/99")

    assert resp.status_code == 302
    assert flashes() == [("danger", "El cliente no existe")]


def test_edit_form_prefills_existing_client(client, clients_repo):
    _seed(clients_repo, 1)

    resp = client.get("/form/1")

    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Editar cliente" in body
    assert 'value="Name01"' in body


# ---- submit ----

def test_submit_creates_client(client, clients_repo, flashes):
    client.get("/form")

    resp = client.post("/form", data=VALID)

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/listar")
    saved = clients_repo.find_by_id(1)
    assert saved.name == "Ada"
    assert saved.created_at is not None
    assert saved.photo is None
    assert flashes() == [("success", "Cliente creado con éxito")]
    with client.session_transaction() as sess:
        assert EDIT_BUFFER_SESSION_KEY not in sess


def test_submit_without_prior_form_get_creates_client(client, clients_repo):
    resp = client.post("/form", data=VALID)

    assert resp.status_code == 302
    assert clients_repo.find_by_id(1).email == "ada@example.com"


def test_submit_edit_preserves_id_and_created_at(client, clients_repo, flashes):
    created = datetime(2020, 2, 2, 10, 0, 0)
    original = clients_repo.add(name="Old", surname="Name", email="old@example.com",
                                created_at=created, photo="keep.jpg")
    client.get(f"/form/{original.id}")

    resp = client.post("/form", data={**VALID, "id": "555", "created_at": "1999-01-01"})

    assert resp.status_code == 302
    assert [c.id for c in clients_repo.find_all()] == [original.id]
    updated = clients_repo.find_by_id(original.id)
    assert updated.name == "Ada"
    assert updated.created_at == created
    assert updated.photo == "keep.jpg"
    assert flashes() == [("success", "Cliente editado con éxito")]


@pytest.mark.parametrize("missing", ["name", "surname", "email"])
def test_submit_with_blank_required_field_rerenders_form(client, clients_repo, missing):
    client.get("/form")
    data = {**VALID, missing: ""}

    resp = client.post("/form", data=data)

    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "no puede estar vacío" in body
    assert "is-invalid" in body
    assert 'value="Lovelace"' in body or missing == "surname"
    assert "save" not in clients_repo.calls
    with client.session_transaction() as sess:
        assert EDIT_BUFFER_SESSION_KEY in sess


def test_submit_with_photo_stores_file_and_serves_it(client, clients_repo, upload_dir, flashes):
    client.get("/form")

    resp = client.post(
        "/form",
        data={**VALID, "file": (io.BytesIO(b"\x89PNG fake"), "me.png")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 302
    photo = clients_repo.find_by_id(1).photo
    assert photo.endswith("_me.png")
    assert (upload_dir / photo).read_bytes() == b"\x89PNG fake"
    assert ("info", f"Has subido correctamente '{photo}'") in flashes()

    served = client.get(f"/uploads/{photo}")
    assert served.status_code == 200
    assert served.data == b"\x89PNG fake"


def test_submit_with_empty_file_part_keeps_no_photo(client, clients_repo, upload_dir):
    client.get("/form")

    client.post(
        "/form",
        data={**VALID, "file": (io.BytesIO(b""), "")},
        content_type="multipart/form-data",
    )

    assert clients_repo.find_by_id(1).photo is None
    assert not upload_dir.exists() or list(upload_dir.iterdir()) == []


class FailingStorage(LocalPhotoStorage):
    def store(self, stream, original_filename):
        raise UploadError("disk full")


def test_upload_failure_does_not_abort_save(monkeypatch, clients_repo, tmp_path, caplog):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        Container(
            clients_repo=clients_repo,
            client_service=ClientService(clients_repo),
            photo_storage=FailingStorage(tmp_path),
        )
    )
    test_client = app.test_client()
    test_client.get("/form")

    resp = test_client.post(
        "/form",
        data={**VALID, "file": (io.BytesIO(b"data"), "me.png")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 302
    saved = clients_repo.find_by_id(1)
    assert saved.name == "Ada"
    assert saved.photo is None
    assert "Photo upload failed" in caplog.text


# ---- detail ----

def test_detail_view_shows_client(client, clients_repo):
    clients_repo.add(name="Ada", surname="Lovelace", email="ada@example.com", photo="ada.png")

    resp = client.get("/ver/1")

    body = resp.get_data(as_text=True)
    assert resp.status_code == 200
    assert "Detalle de cliente: Ada" in body
    assert "/uploads/ada.png" in body


@pytest.mark.parametrize("url", ["/ver/99", "/ver/0", "/ver/-4"])
def test_detail_view_for_unknown_client_redirects(client, flashes, url):
    resp = client.get(url)

    assert resp.status_code == 302
    assert flashes() == [("danger", "El cliente no se encontró en la base de datos")]


# ---- delete ----

def test_delete_existing_client(client, clients_repo, flashes):
    _seed(clients_repo, 2)

    resp = client.get("/eliminar/1")

    assert resp.status_code == 302
    assert [c.id for c in clients_repo.find_all()] == [2]
    assert flashes() == [("success", "Cliente eliminado con éxito")]


def test_delete_missing_client_is_idempotent(client, clients_repo):
    _seed(clients_repo, 2)

    resp = client.get("/eliminar/77")

    assert resp.status_code == 302
    assert [c.id for c in clients_repo.find_all()] == [1, 2]


@pytest.mark.parametrize("bad_id", [0, -3])
def test_delete_with_non_positive_id_is_ignored(client, clients_repo, flashes, bad_id):
    resp = client.get(f"/eliminar/{bad_id}")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/listar")
    assert "delete_by_id" not in clients_repo.calls
    assert flashes() == []
