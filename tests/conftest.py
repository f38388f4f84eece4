import json

import pytest

from app import create_app

SEED = [
    {
        "projectName": "Zebra",
        "projectIdentifier": "A",
        "description": "Stripes",
        "start_date": "2024-05-01T09:00",
        "end_date": "2024-06-01T17:00",
    },
    {
        "projectName": "Apple",
        "projectIdentifier": "B",
        "description": "Orchard",
        "start_date": "2024-01-15T13:45",
        "end_date": "2024-03-01T08:05",
    },
]


@pytest.fixture()
def seed_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


@pytest.fixture()
def app(seed_file):
    return create_app({"PROJECT_DATA_SOURCE": str(seed_file), "TESTING": True})


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return app.extensions["projects"]["store"]
