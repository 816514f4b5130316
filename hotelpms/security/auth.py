"""
Authentication dependencies
Tokens are issued by the hosted auth provider; this service only verifies them
and resolves the operator's hotel
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from hotelpms.config import settings
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel

logger = logging.getLogger(__name__)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


@dataclass
class AuthUser:
    """Identity carried by a verified token"""
    id: str
    email: Optional[str] = None
    role: Optional[str] = None


def create_access_token(user_id: str, email: Optional[str] = None,
                        role: str = "authenticated") -> str:
    """Create a token in the provider's format (development and tests)"""
    expire = datetime.now(UTC) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": user_id,
        "role": role,
        "exp": expire
    }
    if email is not None:
        to_encode["email"] = email
    if settings.JWT_AUDIENCE:
        to_encode["aud"] = settings.JWT_AUDIENCE
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode and verify a token"""
    options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            options=options
        )
    except JWTError as e:
        logger.debug(f"Token rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials"
        )


def _user_from_payload(payload: dict) -> AuthUser:
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials"
        )
    return AuthUser(id=str(user_id), email=payload.get("email"), role=payload.get("role"))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthUser:
    """Currently signed-in user"""
    return _user_from_payload(decode_token(credentials.credentials))


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security)
) -> Optional[AuthUser]:
    """Signed-in user, or None for anonymous visitors of public pages"""
    if credentials is None:
        return None
    return _user_from_payload(decode_token(credentials.credentials))


async def get_current_hotel(
    current_user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> Hotel:
    """Hotel owned by the signed-in operator"""
    hotel = db.query(Hotel).filter(Hotel.user_id == current_user.id).first()
    if not hotel:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No hotel is associated with this user"
        )
    return hotel
