import os

from dotenv import find_dotenv, load_dotenv

# .env in the working directory (or a parent) fills in unset variables
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_PORT = 8080


def resolve_port(port=None):
    """Return the port the server should listen on.

    Falls back to DEFAULT_PORT when the value is missing, not a number or
    below 1.
    """
    if not port:
        return DEFAULT_PORT
    try:
        value = int(port)
    except (TypeError, ValueError):
        return DEFAULT_PORT
    if value < 1:
        return DEFAULT_PORT
    return value


def _flag(name, default='0'):
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///scorecard.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = resolve_port(os.environ.get('PORT'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    ALLOWED_ORIGINS = [o.strip() for o in os.environ.get('ALLOWED_ORIGINS', 'http://localhost:5173').split(',') if o.strip()]
    # Token verifier: deny (reject everything), static (fixed dev identity) or jwt
    AUTH_VERIFIER = os.environ.get('AUTH_VERIFIER', 'deny')
    AUTH_JWT_SECRET = os.environ.get('AUTH_JWT_SECRET', '')
    AUTH_JWT_ALGORITHMS = [a.strip() for a in os.environ.get('AUTH_JWT_ALGORITHMS', 'HS256').split(',') if a.strip()]
    AUTH_JWT_AUDIENCE = os.environ.get('AUTH_JWT_AUDIENCE') or None
    AUTH_STATIC_UID = os.environ.get('AUTH_STATIC_UID', 'sample-uid')
    AUTH_STATIC_EMAIL = os.environ.get('AUTH_STATIC_EMAIL', 'test@email.com')
    # Off by default: any authenticated user may read or change any game by id
    ENFORCE_GAME_OWNERSHIP = _flag('ENFORCE_GAME_OWNERSHIP')
