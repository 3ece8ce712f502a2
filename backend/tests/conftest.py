import pytest
from fastapi.testclient import TestClient

from catalog.main import create_app
from catalog.repositories import MaterialStore
from catalog.utils.sample_data import sample_drafts


@pytest.fixture
def store():
    """A fresh store holding the sample catalog."""
    return MaterialStore(initial=sample_drafts())


@pytest.fixture
def empty_store():
    return MaterialStore()


@pytest.fixture
def client(store):
    """TestClient around an app that owns `store`."""
    app = create_app(store)
    with TestClient(app) as c:
        yield c
