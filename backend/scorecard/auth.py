"""Authentication gate.

Every request to the games API carries an ``Authorization`` header. The
header value is handed to a pluggable :class:`TokenVerifier` which maps it to
an :class:`AuthUser` or rejects it. The default verifier rejects everything,
so a deployment has to opt into a real verifier (``jwt``) or the development
stand-in (``static``).
"""
from abc import ABC, abstractmethod

import jwt
from flask import current_app
from flask_login import UserMixin

from scorecard import login_manager
from scorecard.errors import Unauthorized


class AuthUser(UserMixin):
    def __init__(self, uid, email=None):
        self.uid = uid
        self.email = email

    def get_id(self):
        return self.uid

    def to_dict(self):
        return {'uid': self.uid, 'email': self.email}


class TokenVerifier(ABC):
    """Maps a bearer token to an AuthUser, or returns None to reject it."""

    @abstractmethod
    def verify(self, token):
        ...


class DenyAllVerifier(TokenVerifier):
    def verify(self, token):
        return None


class StaticTokenVerifier(TokenVerifier):
    """Development stand-in: any non-empty token resolves to one fixed identity."""

    def __init__(self, uid='sample-uid', email='test@email.com'):
        self.uid = uid
        self.email = email

    def verify(self, token):
        if not token:
            return None
        return AuthUser(uid=self.uid, email=self.email)


class JWTVerifier(TokenVerifier):
    """Verifies signed JWTs; the subject (or ``uid`` claim) is the user id."""

    def __init__(self, secret, algorithms=('HS256',), audience=None):
        if not secret:
            raise ValueError('JWTVerifier requires a secret')
        self.secret = secret
        self.algorithms = list(algorithms)
        self.audience = audience

    def verify(self, token):
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=self.algorithms,
                audience=self.audience,
                options={'verify_aud': self.audience is not None},
            )
        except jwt.ExpiredSignatureError:
            current_app.logger.info('[auth] rejected expired token')
            return None
        except jwt.PyJWTError:
            current_app.logger.info('[auth] rejected invalid token')
            return None
        uid = payload.get('sub') or payload.get('uid')
        if not uid:
            return None
        return AuthUser(uid=str(uid), email=payload.get('email'))


def build_verifier(config):
    kind = (config.get('AUTH_VERIFIER') or 'deny').lower()
    if kind == 'deny':
        return DenyAllVerifier()
    if kind == 'static':
        return StaticTokenVerifier(
            uid=config.get('AUTH_STATIC_UID', 'sample-uid'),
            email=config.get('AUTH_STATIC_EMAIL', 'test@email.com'),
        )
    if kind == 'jwt':
        return JWTVerifier(
            config.get('AUTH_JWT_SECRET'),
            algorithms=config.get('AUTH_JWT_ALGORITHMS') or ['HS256'],
            audience=config.get('AUTH_JWT_AUDIENCE'),
        )
    raise ValueError(f'Unknown AUTH_VERIFIER {kind!r}')


def _extract_token(header_value):
    if not header_value:
        return None
    token = header_value.strip()
    scheme, _, credentials = token.partition(' ')
    if scheme.lower() == 'bearer':
        token = credentials.strip()
    return token or None


def init_auth(flask_app, verifier=None):
    flask_app.extensions['token_verifier'] = verifier or build_verifier(flask_app.config)


@login_manager.request_loader
def load_user_from_request(request):
    token = _extract_token(request.headers.get('Authorization'))
    if not token:
        return None
    verifier = current_app.extensions['token_verifier']
    try:
        return verifier.verify(token)
    except Exception:
        current_app.logger.exception('[auth] error verifying token')
        return None


@login_manager.unauthorized_handler
def unauthorized():
    raise Unauthorized()
