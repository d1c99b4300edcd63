import logging
import time
from typing import Any, Dict

from fastapi import HTTPException, status
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pymongo.errors import DuplicateKeyError

from keuzekompas.core.config import get_settings
from keuzekompas.features.users.repository import user_repository
from keuzekompas.features.users.schemas import to_public
from .schemas import AuthResponse, LoginRequest, RegisterRequest

logger = logging.getLogger("auth.service")

_pwd_context: CryptContext | None = None


def _context() -> CryptContext:
    global _pwd_context
    if _pwd_context is None:
        _pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=get_settings().bcrypt_rounds,
        )
    return _pwd_context


def hash_password(password: str) -> str:
    return _context().hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return _context().verify(password, password_hash)
    except ValueError:
        # malformed stored hash
        return False


def create_access_token(user: Dict[str, Any]) -> str:
    settings = get_settings()
    if not settings.jwt_secret:
        logger.error("JWT_SECRET not configured; cannot sign tokens")
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Token generation failed: JWT_SECRET not configured")
    now = int(time.time())
    payload = {
        "sub": str(user["_id"]),
        "email": user["email"],
        "name": user["name"],
        "iat": now,
        "exp": now + settings.jwt_expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid token")
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Token has expired")
    except JWTError:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid token")


def _auth_response(user: Dict[str, Any]) -> AuthResponse:
    return AuthResponse(user=to_public(user), token=create_access_token(user))


async def register_user(payload: RegisterRequest) -> AuthResponse:
    existing = await user_repository.get_user_by_email(payload.email)
    if existing:
        logger.info("register rejected: email already exists")
        raise HTTPException(status.HTTP_409_CONFLICT, "Email already exists")
    try:
        user = await user_repository.create_user(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
    except DuplicateKeyError:
        raise HTTPException(status.HTTP_409_CONFLICT, "Email already exists")
    logger.info("registration complete user_id=%s", user["_id"])
    return _auth_response(user)


async def login_user(payload: LoginRequest) -> AuthResponse:
    user = await user_repository.get_user_by_email(payload.email)
    if not user or not verify_password(payload.password, user.get("password") or ""):
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")
    logger.info("login complete user_id=%s", user["_id"])
    return _auth_response(user)
