"""
Password hashing, JWT issuing and the ``get_current_user`` dependency.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.core.config import settings
from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.users import SignUpRequest

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")
# creates that stamp an owner also accept anonymous callers
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/api/auth/token", auto_error=False
)

# Argon2 hasher instance (thread-safe)
ph = PasswordHasher()


def hash_password(password: str) -> str:
    return ph.hash(password)


def verify_password(plain_password: str, stored_hash: Optional[str]) -> bool:
    if not stored_hash:
        return False
    try:
        return ph.verify(stored_hash, plain_password)
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(subject: UserModel, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"sub": str(subject.id), "email": subject.email, "exp": expire}
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def token_for(user: UserModel) -> str:
    return create_access_token(user)


def decode_access_token(token: str) -> Optional[dict]:
    """Claims of a valid, unexpired token; None for anything else."""
    try:
        claims = jwt.decode(
            token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except jwt.PyJWTError:
        return None
    if not claims.get("sub") or not claims.get("email"):
        return None
    return claims


async def signup_user(db: AsyncSession, req: SignUpRequest) -> UserModel:
    taken = await db.execute(
        select(UserModel.id).where(
            or_(UserModel.email == req.email, UserModel.username == req.username)
        )
    )
    if taken.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email or username already exists",
        )
    user = UserModel(
        **req.model_dump(exclude={"password"}),
        password_hash=hash_password(req.password),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info(f"👤 New user signed up: {user.username}")
    return user


async def login_user(db: AsyncSession, email: str, password: str) -> str:
    result = await db.execute(select(UserModel).where(UserModel.email == email))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if user.status == 0:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="User account is disabled"
        )
    return token_for(user)


async def get_current_user(
    token: str = Depends(oauth2_scheme), db: AsyncSession = Depends(get_db)
) -> UserModel:
    claims = decode_access_token(token)
    user = None
    if claims is not None:
        try:
            user = await db.get(UserModel, UUID(claims["sub"]))
        except ValueError:
            user = None
    # a token outlives neither its user nor an email change
    if user is None or user.email != claims["email"]:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_optional_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[UserModel]:
    """The caller when a bearer token is sent, None otherwise. A bad token is still a 401."""
    if token is None:
        return None
    return await get_current_user(token, db)


def owner_id(current_user: Optional[UserModel], fallback: Optional[UUID], label: str) -> UUID:
    """Authenticated user wins; otherwise the id the client put in the body."""
    if current_user is not None:
        return current_user.id
    if fallback is not None:
        return fallback
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail=f"{label} is required"
    )
