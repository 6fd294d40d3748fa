"""
Bearer-token authentication against the hosted auth provider.

Tokens are issued elsewhere; this module only verifies them and makes sure a
profile row exists for the identity they carry.
"""
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from styled.config import settings
from styled.core.exceptions import AuthenticationError
from styled.database import get_db
from styled.models import User

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

bearer_scheme = HTTPBearer(auto_error=False)


def verify_access_token(token: str) -> Optional[dict]:
    """
    Verify and decode a provider JWT.

    Returns:
        The decoded claims if valid, None if invalid or expired
    """
    if not settings.AUTH_JWT_SECRET:
        logger.error("AUTH_JWT_SECRET not set; rejecting all tokens")
        return None
    try:
        return jwt.decode(
            token,
            settings.AUTH_JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=settings.AUTH_JWT_AUDIENCE or None,
        )
    except JWTError as e:
        logger.info(f"Token rejected: {e}")
        return None


def get_or_create_user(db: Session, user_id: str, email: Optional[str] = None) -> User:
    """Profile row for the identity, created with onboarding defaults on first sight"""
    user = db.query(User).filter(User.id == user_id).first()
    if user:
        if email and user.email != email:
            user.email = email
            db.commit()
        return user

    user = User(
        id=user_id,
        email=email,
        style_vibe=[],
        color_palette=[],
        avoid_colors=[],
        budget_level="$$",
        use_auto_location=True,
        use_calendar_styling=True,
        plan_ahead_days=2,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Provisioned profile for user {user_id}")
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")

    payload = verify_access_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid token")

    return get_or_create_user(db, user_id, payload.get("email"))
