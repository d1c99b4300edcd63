from fastapi import APIRouter, Depends, status

from keuzekompas.features.users.schemas import UserPublic
from .deps import get_current_user
from .schemas import AuthResponse, LoginRequest, LogoutResponse, ProfileResponse, RegisterRequest
from .service import login_user, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest):
    return await register_user(payload)


@router.post("/login", response_model=AuthResponse, status_code=status.HTTP_200_OK)
async def login(payload: LoginRequest):
    """Authenticate user with JSON body (email, password)."""
    return await login_user(payload)


@router.get("/profile", response_model=ProfileResponse)
async def profile(user: UserPublic = Depends(get_current_user)):
    return ProfileResponse(user=user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(user: UserPublic = Depends(get_current_user)):
    # Tokens are stateless; the client drops its copy.
    return LogoutResponse()
