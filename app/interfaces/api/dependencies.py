"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.domain.exceptions import UnauthorizedError
from app.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def resolve_recipient_id(token: str | None) -> str:
    """Return the recipient id carried by ``token``.

    Raises :class:`UnauthorizedError` when the token is missing, invalid or
    has no subject.
    """

    if not token:
        raise UnauthorizedError("Missing bearer token")
    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise UnauthorizedError("Invalid bearer token") from exc

    subject = payload.get("sub")
    if subject is None or not str(subject).strip():
        raise UnauthorizedError("Token has no subject")
    return str(subject)


def get_current_recipient_id(token: str | None = Depends(oauth2_scheme)) -> str:
    """Return the authenticated recipient id or respond with ``401``."""

    try:
        return resolve_recipient_id(token)
    except UnauthorizedError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc
