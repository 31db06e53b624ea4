"""
Password hashing and access-token signing.

Callers depend only on these two small interfaces:

    hasher = get_password_hasher()
    digest = hasher.hash("password123")
    hasher.verify("password123", digest)  # True

    signer = get_token_signer()
    token = signer.issue_token({"userId": 1, "login": "john123"})
    signer.verify_token(token)  # {"userId": 1, "login": "john123"}

Passwords use bcrypt with a fixed cost factor. bcrypt only reads the first
72 bytes of its input, so the password is first reduced to the base64 of
its SHA-256 digest (44 bytes) and every byte of a long password counts.

Tokens are itsdangerous URL-safe timed signatures: the payload is signed
(not encrypted) with TOKEN_SECRET and carries its own issue timestamp, so
expiry is checked on verification without any server-side state.
"""

import base64
import hashlib
import logging

import bcrypt
from itsdangerous import URLSafeTimedSerializer, BadData, SignatureExpired

import config
from exceptions.auth import InvalidTokenException

logger = logging.getLogger(__name__)

TOKEN_SALT = "coffee-house-access-token"


class PasswordHasher:
    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    @staticmethod
    def _prehash(plaintext: str) -> bytes:
        return base64.b64encode(hashlib.sha256(plaintext.encode('utf-8')).digest())

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._prehash(plaintext), salt).decode('utf-8')

    def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(self._prehash(plaintext), digest.encode('utf-8'))
        except ValueError:
            # Stored value is not a bcrypt digest
            logger.warning("Password digest has an unexpected format")
            return False


class TokenSigner:
    def __init__(self, secret: str, expires_in_seconds: int = 86400):
        self.expires_in_seconds = expires_in_seconds
        self._serializer = URLSafeTimedSerializer(secret, salt=TOKEN_SALT)

    def issue_token(self, claims: dict) -> str:
        return self._serializer.dumps(claims)

    def verify_token(self, token: str) -> dict:
        """
        Return the claims of a valid token.

        Raises:
            InvalidTokenException: bad signature, malformed payload or expired token
        """
        try:
            claims = self._serializer.loads(token, max_age=self.expires_in_seconds)
        except SignatureExpired:
            raise InvalidTokenException("token expired")
        except BadData:
            raise InvalidTokenException("invalid signature")

        if not isinstance(claims, dict) or not isinstance(claims.get("userId"), int):
            raise InvalidTokenException("malformed claims")
        return claims


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=config.PASSWORD_HASH_ROUNDS)


def get_token_signer() -> TokenSigner:
    return TokenSigner(config.TOKEN_SECRET, config.TOKEN_EXPIRES_IN_SECONDS)
