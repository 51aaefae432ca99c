import pytest

from flask_app.app import create_app, dispose_app_engine
from registration_engine import AddressTemplate, AddressTemplateRegistry

PHONE_UUID = "14d4f066-15f5-102d-96e4-000c29c2a5d7"


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "DATABASE_URL": f"sqlite:///{tmp_path / 'registration.db'}",
        "ADDRESS_TEMPLATE_PATH": None,
        "TESTING": True,
    })
    yield app
    dispose_app_engine(app)


@pytest.fixture
def client(app):
    return app.test_client()


def test_validate_address_ok(client):
    resp = client.post("/validate_address", json={"latitude": "-1.2921", "longitude": "36.8219"})
    assert resp.status_code == 200
    assert resp.get_json() == {"valid": True, "errors": []}


def test_validate_address_rejects_both(client):
    resp = client.post("/validate_address", json={"latitude": "91", "longitude": "180.1"})
    assert resp.status_code == 422
    assert resp.get_json()["errors"] == [
        "registrationapp.latitude.invalid",
        "registrationapp.longitude.invalid",
    ]


def test_validate_address_requires_json_object(client):
    assert client.post("/validate_address", data="hello").status_code == 400
    assert client.post("/validate_address", json=["91"]).status_code == 400


def test_validate_address_non_string_field(client):
    resp = client.post("/validate_address", json={"latitude": 45})
    assert resp.status_code == 400


def test_template_override_respected(tmp_path):
    registry = AddressTemplateRegistry(templates=[
        AddressTemplate(name="custom", element_regex={"latitude": ".+"}),
    ])
    app = create_app({
        "DATABASE_URL": f"sqlite:///{tmp_path / 'custom.db'}",
        "ADDRESS_TEMPLATES": registry,
    })
    resp = app.test_client().post("/validate_address", json={"latitude": "north"})
    assert resp.status_code == 200
    dispose_app_engine(app)


def test_person_attribute_lookup(app, client):
    service = app.extensions["person_service"]
    service.save_person_attribute_type(PHONE_UUID, "Telephone Number")
    person_id = service.save_person({PHONE_UUID: "555-0100", "unknown-uuid": "x"})

    resp = client.get(f"/person/{person_id}/attribute/{PHONE_UUID}")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "person_id": person_id,
        "attribute_type_uuid": PHONE_UUID,
        "value": "555-0100",
    }


def test_person_attribute_absent(app, client):
    service = app.extensions["person_service"]
    service.save_person_attribute_type(PHONE_UUID, "Telephone Number")
    person_id = service.save_person({})

    assert client.get(f"/person/{person_id}/attribute/{PHONE_UUID}").get_json()["value"] is None
    assert client.get(f"/person/{person_id}/attribute/no-such-type").get_json()["value"] is None
    assert client.get(f"/person/9999/attribute/{PHONE_UUID}").get_json()["value"] is None


def test_dispose_app_engine_releases_engine(tmp_path):
    app = create_app({"DATABASE_URL": f"sqlite:///{tmp_path / 'dispose.db'}"})
    assert "db_engine" in app.extensions
    dispose_app_engine(app)
    assert "db_engine" not in app.extensions
    dispose_app_engine(app)   # second call is a no-op
