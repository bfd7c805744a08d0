"""
Authentication dependencies for FastAPI.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from todolist.auth.service import AuthService, get_auth_service
from todolist.models.user import UserResponse

# Errors are raised as Unauthenticated below so they share the {msg} body
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth: AuthService = Depends(get_auth_service),
) -> str:
    """
    Dependency to get the current user's ID from the bearer token.
    """
    token = credentials.credentials if credentials else None
    return auth.verify_token(token)


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    auth: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Dependency to get the current authenticated user's profile.
    """
    return await auth.get_profile(user_id)
