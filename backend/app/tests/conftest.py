import os
os.environ["TESTING"] = "1"
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import sys
from pathlib import Path

import uuid

sys.path.append(str(Path(__file__).resolve().parents[2]))

from app.main import app
from app.auth import USER_HEADER
from app.database import Base, engine_options, get_db, init_db

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, **engine_options(SQLALCHEMY_DATABASE_URL))
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base.metadata.drop_all(bind=engine)
init_db(engine)

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def ensure_auth_headers(user_id: str | None = None):
    """
    purpose: identity headers as the auth gateway would forward them
    inputs: optional user id override, otherwise a fresh random user
    outputs: tuple(headers dict, user id str)
    """

    normalized = user_id or f"user-{uuid.uuid4()}"
    return {USER_HEADER: normalized}, normalized


def create_script(client, headers, **fields):
    payload = {"title": "Heist", **fields}
    resp = client.post("/api/scripts", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]["script"]


def create_version(client, headers, script_id, **fields):
    payload = {"raw_content": "INT. BANK - NIGHT", **fields}
    resp = client.post(f"/api/scripts/{script_id}/versions", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]["version"]


def create_element(client, headers, script_id, version_id, **fields):
    payload = {"order_index": 0, "element_type": "scene-heading", "content": "INT. BANK", **fields}
    resp = client.post(
        f"/api/scripts/{script_id}/versions/{version_id}/elements",
        json=payload,
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]["element"]
