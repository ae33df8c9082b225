"""
End-to-end tests for the /api/v1/neighborhood endpoints using a temporary JSON base.
"""
from __future__ import annotations

import json
import shutil
import sys
import uuid
from dataclasses import replace
from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote neighborhood_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from neighborhood_api.app import create_app  # noqa: E402
from neighborhood_api.core import config as core_config  # noqa: E402
from neighborhood_api.domain.neighborhoods import Neighborhood  # noqa: E402
from neighborhood_api.repositories.neighborhood_repository import NeighborhoodRepository  # noqa: E402

BASE_URL = "/api/v1/neighborhood/"
SAO_PAULO_ID = "77b3737d-7450-4d94-8f95-936e2c17e2cc"
DEFAULT_FILE = ROOT / "data" / "neighborhood.default.json"


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Aponta a base para um diretório temporário carregado com os bairros padrão."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("NEIGHBORHOOD_DB_FILE", "neighborhood.json")
    monkeypatch.delenv("NEIGHBORHOOD_SEED_FILE", raising=False)
    monkeypatch.delenv("DEFAULT_PAGE_SIZE", raising=False)
    core_config.get_settings.cache_clear()
    shutil.copyfile(DEFAULT_FILE, tmp_path / "neighborhood.json")

    yield NeighborhoodRepository(tmp_path / "neighborhood.json")

    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(db_env):
    return TestClient(create_app())


@pytest.fixture()
def sao_paulo(db_env):
    db_env.write_all(
        [Neighborhood(id=uuid.UUID(SAO_PAULO_ID), name_district="São Paulo", value_district_m2=Decimal("2000.0"))]
    )
    return db_env


def test_get_neighborhood_by_id(client, sao_paulo):
    resp = client.get(f"{BASE_URL}{SAO_PAULO_ID}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == SAO_PAULO_ID
    assert body["nameDistrict"] == "São Paulo"
    assert body["valueDistrictM2"] == 2000.0


def test_get_unknown_id_returns_404(client):
    resp = client.get(f"{BASE_URL}{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Bairro não encontrado"


def test_get_malformed_id_is_rejected(client):
    assert client.get(f"{BASE_URL}not-a-uuid").status_code == 422


def test_delete_neighborhood_by_id(client, sao_paulo):
    resp = client.delete(f"{BASE_URL}{SAO_PAULO_ID}")

    assert resp.status_code == 204
    assert json.loads(sao_paulo.path.read_text(encoding="utf-8")) == []


def test_delete_unknown_id_returns_404(client, db_env):
    before = db_env.read()
    resp = client.delete(f"{BASE_URL}{uuid.uuid4()}")
    assert resp.status_code == 404
    assert db_env.read() == before


def test_list_with_defaults(client):
    resp = client.get(BASE_URL)

    assert resp.status_code == 200
    body = resp.json()
    assert body["page"] == 1
    assert body["totalPages"] == 1
    assert len(body["neighborhoods"]) == 5


def test_list_with_multiple_pages(client):
    body = client.get(BASE_URL, params={"size": 1}).json()
    assert body["totalPages"] == 5
    assert len(body["neighborhoods"]) == 1


def test_list_in_another_page(client, db_env):
    resp = client.get(BASE_URL, params={"page": 2, "size": 4})

    assert resp.status_code == 200
    body = resp.json()
    assert body["page"] == 2
    assert body["totalPages"] == 2
    assert [n["nameDistrict"] for n in body["neighborhoods"]] == [db_env.read()[4].name_district]


@pytest.mark.parametrize(
    "params,page",
    [
        ({"page": 2, "size": "null"}, 2),
        ({"page": "abc", "size": 2}, 1),
        ({"page": -3, "size": -1}, 1),
        ({"page": 0, "size": 0}, 1),
    ],
)
def test_list_falls_back_to_defaults_on_invalid_parameters(client, params, page):
    resp = client.get(BASE_URL, params=params)

    assert resp.status_code == 200
    assert resp.json()["page"] == page


def test_list_uses_configured_page_size(db_env, monkeypatch):
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "2")
    core_config.get_settings.cache_clear()
    body = TestClient(create_app()).get(BASE_URL).json()
    assert body["totalPages"] == 3
    assert len(body["neighborhoods"]) == 2


def test_list_uses_settings_passed_to_factory(db_env):
    settings = replace(core_config.get_settings(), default_page_size=2)
    body = TestClient(create_app(settings)).get(BASE_URL).json()
    assert body["totalPages"] == 3
    assert len(body["neighborhoods"]) == 2


def test_post_neighborhood(client, db_env):
    resp = client.post(BASE_URL, json={"nameDistrict": "Vila Olímpia", "valueDistrictM2": 45000})

    assert resp.status_code == 201
    body = resp.json()
    uuid.UUID(body["id"])
    assert body["nameDistrict"] == "Vila Olímpia"
    assert body["valueDistrictM2"] == 45000.0
    assert db_env.find_by_name("Vila Olímpia") is not None


@pytest.mark.parametrize(
    "payload,message",
    [
        ({"nameDistrict": "Bairro Fake", "valueDistrictM2": -1},
         "O valor do metro quadrado do bairro não pode ser menor ou igual a zero!"),
        ({"nameDistrict": "Bairro Fake", "valueDistrictM2": 12345678901234.0},
         "O valor do metro quadrado não pode exceder 13 digitos!"),
        ({"nameDistrict": "Bairro Fake", "valueDistrictM2": None},
         "O valor do metro quadrado do bairro não pode ficar vazio!"),
        ({"nameDistrict": "Bairro Fake"},
         "O valor do metro quadrado do bairro não pode ficar vazio!"),
        ({"nameDistrict": "", "valueDistrictM2": 10000.0}, "O bairro não pode ficar vazio!"),
        ({"nameDistrict": "Fake Neighborhood" + "d" * 29, "valueDistrictM2": 10000.0},
         "O comprimento do bairro não pode exceder 45 caracteres!"),
    ],
)
def test_post_validation_errors(client, db_env, payload, message):
    before = db_env.read()
    resp = client.post(BASE_URL, json=payload)

    assert resp.status_code == 400
    assert resp.json()["message"] == message
    assert db_env.read() == before


def test_post_duplicate_name_returns_409(client, db_env):
    existing = db_env.read()[0]
    payload = {"id": str(existing.id), "nameDistrict": existing.name_district, "valueDistrictM2": 1.0}

    resp = client.post(BASE_URL, json=payload)

    assert resp.status_code == 409
    assert resp.json()["message"] == f"{existing.name_district} já está cadastrado na base de dados"


def test_post_rejects_non_object_body(client):
    assert client.post(BASE_URL, content="not json", headers={"content-type": "application/json"}).status_code == 422


def test_corrupted_base_returns_500(client, db_env):
    db_env.path.write_text("{corrompido", encoding="utf-8")

    resp = client.get(BASE_URL)

    assert resp.status_code == 500
    assert resp.json()["error"] == "database_error"


def test_startup_creates_missing_base_and_loads_seed(tmp_path, monkeypatch):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "fresh"))
    monkeypatch.setenv("NEIGHBORHOOD_SEED_FILE", str(DEFAULT_FILE))
    core_config.get_settings.cache_clear()
    try:
        client = TestClient(create_app())
        assert client.get(BASE_URL).json()["totalPages"] == 1
        assert (tmp_path / "fresh" / "neighborhood.json").exists()
    finally:
        core_config.get_settings.cache_clear()


def test_health_and_security_headers(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
