import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# Must be set before dining_review.config is imported anywhere.
_DB_DIR = tempfile.mkdtemp(prefix="dining_review_tests_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ.setdefault("LOG_LEVEL", "WARNING")


async def _reset_schema():
    from dining_review.database import create_all, drop_all
    from dining_review.models import Base  # noqa: F401

    await drop_all()
    await create_all()


@pytest.fixture()
def client():
    """A TestClient over a freshly emptied database."""
    from fastapi.testclient import TestClient

    from dining_review.main import app

    asyncio.run(_reset_schema())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def register_user(client):
    def _register(name="alice", **overrides):
        body = {
            "name": name,
            "city": "Springfield",
            "state": "IL",
            "zipcode": 62701,
            "has_peanut_allergy": True,
            "has_egg_allergy": False,
            "has_diary_allergy": False,
        }
        body.update(overrides)
        response = client.post("/users", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture()
def create_restaurant(client):
    def _create(name="Burger Barn", zipcode=62701):
        response = client.post("/restaurant", json={"name": name, "zipcode": zipcode})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def submit_review(client):
    def _submit(author, restaurant_id, peanut=None, egg=None, dairy=None, **extra):
        body = {
            "author": author,
            "restaurantID": restaurant_id,
            "comment": "ok",
            "ratingPeanut": peanut,
            "ratingEgg": egg,
            "ratingDiary": dairy,
        }
        body.update(extra)
        response = client.post(f"/users/{author}/review", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _submit


@pytest.fixture()
def approved_review(client, submit_review):
    def _approved(author, restaurant_id, **ratings):
        review = submit_review(author, restaurant_id, **ratings)
        response = client.put(f"/admin/reviews/{review['id']}/status/true")
        assert response.status_code == 200, response.text
        return response.json()

    return _approved
