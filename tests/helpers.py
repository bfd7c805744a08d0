"""
Shared builders for tests.
"""
from todolist.config import Settings
from todolist.main import create_app
from tests.fakes import FakeFirestoreClient


def make_settings(**overrides):
    values = {
        "secret_key": "test-secret",
        "bcrypt_rounds": 4,
        "log_level": "WARNING",
        "_env_file": None,
    }
    values.update(overrides)
    return Settings(**values)


def make_app(settings=None, client=None):
    """App wired to an in-memory Firestore."""
    return create_app(settings or make_settings(), client or FakeFirestoreClient())
