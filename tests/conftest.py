import pytest
import os
from unittest.mock import MagicMock

from src.infrastructure.repositories import MongoUserRepository


# Set required environment variables before any imports
@pytest.fixture(scope='session', autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ.setdefault('MONGO_URI', 'mongodb://localhost:27017')
    os.environ.setdefault('FLASK_ENV', 'testing')
    yield


@pytest.fixture(scope='module')
def mock_repository():
    """A stand-in for the Mongo user repository."""
    return MagicMock(spec=MongoUserRepository)


@pytest.fixture(scope='module')
def app(mock_repository):
    """Create and configure a new app instance for each test module."""
    from app import create_app
    app = create_app(repository=mock_repository)
    app.config.update({
        "TESTING": True,
    })
    yield app


@pytest.fixture(scope='module')
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def mock_client():
    """Provides a mocked MongoClient."""
    return MagicMock()
