"""
Authentication routes.
"""
from fastapi import APIRouter, Depends

from todolist.auth.dependencies import get_current_user
from todolist.auth.service import AuthService, get_auth_service
from todolist.models.user import LoginRequest, LoginResponse, MessageResponse, UserCreate, UserResponse

router = APIRouter()


@router.post("/register", response_model=MessageResponse)
async def register(request: UserCreate, auth: AuthService = Depends(get_auth_service)):
    """
    Create a new account. No token is issued; log in afterwards.
    """
    msg = await auth.register(request.name, request.email, request.password)
    return MessageResponse(msg=msg)


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    """
    Authenticate user and return JWT token.
    """
    return await auth.login(request.email, request.password)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """
    Logout user.
    Note: With JWT, logout is handled client-side by discarding the token.
    This endpoint is provided for API completeness.
    """
    return MessageResponse(msg="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)):
    """
    Get current authenticated user info.
    """
    return current_user
