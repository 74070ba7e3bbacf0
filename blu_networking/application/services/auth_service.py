"""Auth service - session token management and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from blu_networking.config import get_settings
from blu_networking.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from blu_networking.domain.models.user import User, UserLevel
from blu_networking.domain.repositories.chapter_repository import ChapterRepository
from blu_networking.domain.repositories.user_repository import UserRepository
from blu_networking.domain.schemas.auth import UserCreate

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unrecognised or malformed hash
        return False


def create_session_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.SESSION_MAX_AGE_MINUTES)
    )
    to_encode = {"sub": str(user.id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.SESSION_ALGORITHM)


def decode_session_token(token: str) -> Optional[int]:
    """Return the user id carried by a valid token, else None."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.SESSION_ALGORITHM])
        return int(payload["sub"])
    except (JWTError, KeyError, ValueError):
        return None


def authenticate_user(repo: UserRepository, username: str, password: str) -> Optional[User]:
    user = repo.get_by_username(username)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def ensure_unique(repo: UserRepository, username: str, email: str) -> None:
    if repo.get_by_username(username):
        raise BusinessRuleViolationException("Username already exists")
    if repo.get_by_email(email):
        raise BusinessRuleViolationException("Email already exists")


def register_user(repo: UserRepository, chapter_repo: ChapterRepository, body: UserCreate) -> User:
    """Self-service registration. New accounts are always plain members."""
    ensure_unique(repo, body.username, body.email)
    if body.chapter_id is not None and chapter_repo.get_by_id(body.chapter_id) is None:
        raise EntityNotFoundException("Chapter not found")
    data = body.model_dump(exclude={"password"})
    data["password_hash"] = hash_password(body.password)
    data["user_level"] = UserLevel.MEMBER
    user = repo.create(data)
    logger.info("User registered", user_id=user.id, username=user.username)
    return user


def change_password(repo: UserRepository, user: User, current_password: str, new_password: str) -> User:
    if not verify_password(current_password, user.password_hash):
        raise BusinessRuleViolationException("Current password is incorrect")
    return repo.update_password(user, hash_password(new_password))


def seed_superadmin(repo: UserRepository) -> Optional[User]:
    """Create the configured executive-board account if it does not exist yet."""
    if repo.get_by_username(settings.SUPERADMIN_USERNAME):
        return None
    user = repo.create({
        "username": settings.SUPERADMIN_USERNAME,
        "password_hash": hash_password(settings.SUPERADMIN_PASSWORD),
        "full_name": "Platform Administrator",
        "email": settings.SUPERADMIN_EMAIL,
        "company": "BLU Networking",
        "title": "Administrator",
        "user_level": UserLevel.EXECUTIVE_BOARD,
    })
    logger.info("Superadmin account created", username=user.username)
    return user
