"""Bearer token helpers.

Sign-in lives in an external identity provider; this service only needs to
verify the token it issued and read the recipient id from ``sub``.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from app.config import get_settings

ALGORITHM = "HS256"


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def create_recipient_token(recipient_id: str, expires_delta: timedelta | None = None) -> str:
    """Return a token whose subject is ``recipient_id``."""

    return create_access_token({"sub": str(recipient_id)}, expires_delta)
