"""
Authentication endpoints for API v1.

Registration and login both open a session and return a bearer token
bound to it, together with the user (never the password hash).
"""

from fastapi import APIRouter, Depends, HTTPException, status

from creator_hub_api.app.core.security import end_session, get_bearer_token, get_current_user, start_session
from creator_hub_api.app.schemas.user import LoginRequest, TokenResponse, User, UserCreate, UserRead
from creator_hub_api.app.services.user_service import UserService
from creator_hub_api.app.storage import Storage, get_storage


router = APIRouter()


async def _login(storage: Storage, user: User) -> TokenResponse:
    token = start_session(storage, user.id)
    user = await UserService.set_online(storage, user.id, True) or user
    return TokenResponse(access_token=token, user=UserRead.model_validate(user))


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(data: UserCreate, storage: Storage = Depends(get_storage)) -> TokenResponse:
    """Create an account and log it in."""
    try:
        user = await UserService.register(storage, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return await _login(storage, user)


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest, storage: Storage = Depends(get_storage)) -> TokenResponse:
    user = await UserService.authenticate(storage, data.username, data.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return await _login(storage, user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str = Depends(get_bearer_token),
    current_user: User = Depends(get_current_user),
    storage: Storage = Depends(get_storage),
) -> None:
    """Destroy the caller's session; the token stops working at once."""
    end_session(storage, token)
    await UserService.set_online(storage, current_user.id, False)
    return None


@router.get("/user", response_model=UserRead)
async def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)
