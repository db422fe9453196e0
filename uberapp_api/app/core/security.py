"""
Security helpers for password hashing and token authentication.

Passwords are hashed with bcrypt through passlib's ``CryptContext``;
the work factor comes from ``settings.bcrypt_rounds``.  Session tokens
are HS256‑signed JWTs produced with ``python-jose``.  Besides the
registered ``iss``, ``sub``, ``iat`` and ``exp`` claims each token
carries a custom ``userID`` claim naming the passenger or driver it was
issued to.  Clients send it back as ``Authorization: Bearer <token>``.
"""

import time
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import settings
from .exceptions import AuthenticationError

USER_ID_CLAIM = "userID"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password`` in crypt(3) format."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Check ``plain_password`` against a stored hash.

    Returns ``False`` rather than raising when the stored value is
    missing or is not a recognised hash.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: str, expires_delta: Optional[int] = None) -> str:
    """Create a signed token for ``user_id``.

    Parameters
    ----------
    user_id : str
        Identifier of the passenger or driver, stored in the ``userID``
        claim.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to ``settings.token_ttl_seconds``.
        Negative values produce an already expired token.
    """
    now = int(time.time())
    lifetime = settings.token_ttl_seconds if expires_delta is None else expires_delta
    claims: Dict[str, Any] = {
        "iss": settings.token_issuer,
        "sub": settings.token_subject,
        "iat": now,
        "exp": now + lifetime,
        USER_ID_CLAIM: user_id,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify signature, issuer and expiry; return the claims or ``None``."""
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            issuer=settings.token_issuer,
        )
    except JWTError:
        return None


def validate_token_user(token: str) -> Optional[str]:
    """Return the ``userID`` a valid token was issued to, else ``None``."""
    claims = decode_access_token(token)
    if not claims:
        return None
    user_id = claims.get(USER_ID_CLAIM)
    return str(user_id) if user_id else None


security = HTTPBearer(auto_error=False)


def get_token_user(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> str:
    """Dependency returning the ``userID`` of the bearer token.

    Raises :class:`AuthenticationError` (HTTP 401) when the header is
    missing or the token is invalid or expired.  Whether the account
    still exists is checked by the caller.
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    user_id = validate_token_user(credentials.credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")
    return user_id
