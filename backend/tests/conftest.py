import os
import sys
import pytest

# Ensure the backend root (containing the `scorecard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from scorecard import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    ALLOWED_ORIGINS = ['http://localhost:5173']
    AUTH_VERIFIER = 'static'
    AUTH_STATIC_UID = 'sample-uid'
    AUTH_STATIC_EMAIL = 'test@email.com'
    ENFORCE_GAME_OWNERSHIP = False
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import scorecard.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def auth_headers():
    return {'Authorization': 'Bearer any-token'}


@pytest.fixture()
def game_payload():
    return {
        'title': 'Saturday round',
        'numberHoles': 3,
        'players': [{'name': 'Alice', 'uid': 'alice-uid'}, {'name': 'Bob'}],
    }


@pytest.fixture()
def config_class():
    return TestConfig
