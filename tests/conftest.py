"""Pytest configuration"""

import pytest

from rescuedge import create_app, db
from rescuedge.config import TestConfig


class EmptyTestConfig(TestConfig):
    SEED_HOSPITALS = 'false'


@pytest.fixture
def app():
    """App backed by an in-memory database seeded with the demo hospitals."""
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def empty_app():
    """App with an empty hospital registry."""
    app = create_app(EmptyTestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
