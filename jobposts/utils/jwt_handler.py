# jwt_handler.py
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError
from jobposts.config import settings
from jobposts.errors import unauthorized
from jobposts.schemas.common import KEY_MAX_LENGTH


def create_access_token(data: dict, expires_delta: timedelta) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise unauthorized("Token expired") from exc
    except JWTError as exc:
        raise unauthorized("Invalid token") from exc


def subject_from_token(token: str) -> str:
    payload = decode_access_token(token)
    subject = payload.get("sub")
    if subject is None or not str(subject).strip() or len(str(subject)) > KEY_MAX_LENGTH:
        raise unauthorized("Invalid token payload")
    return str(subject)
