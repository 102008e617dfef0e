from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Union, Optional
from jose import jwt, JWTError
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from nutriplan.core.config import get_settings


def create_access_token(
    subject: Union[str, Any], is_admin: bool = False, expires_delta: Optional[timedelta] = None
) -> str:
    """Create a JWT access token.

    Token issuance belongs to the auth service; this helper exists for local
    tooling and tests that need a token the API will accept.
    """
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"exp": expire, "sub": str(subject), "isAdmin": bool(is_admin)}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


# OAuth2 scheme for FastAPI dependency
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_current_user(token: str = Depends(oauth2_scheme)) -> Dict[str, Any]:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        # covers bad signatures and expired tokens
        raise credentials_exception
    if payload.get("sub") is None:
        raise credentials_exception
    return payload
