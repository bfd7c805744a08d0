"""
Account registration, login and token verification.
"""
import logging
from datetime import timedelta
from typing import Optional

from fastapi import Depends

from todolist.auth.utils import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)
from todolist.config import Settings, get_app_settings
from todolist.errors import Conflict, UserNotFound, InvalidCredentials, Unauthenticated
from todolist.models.user import LoginResponse, UserResponse
from todolist.services.firestore import FirestoreService, get_firestore_service

logger = logging.getLogger(__name__)


class AuthService:
    """Registers users, checks their passwords and issues bearer tokens."""

    def __init__(self, settings: Settings, store: FirestoreService):
        self.settings = settings
        self.store = store

    async def register(self, name: str, email: str, password: str) -> str:
        """Create an account. Raises Conflict when the email is taken."""
        existing_user = await self.store.get_user_by_email(email)
        if existing_user:
            raise Conflict()

        password_hash = hash_password(password, rounds=self.settings.bcrypt_rounds)
        await self.store.create_user(name=name, email=email, password_hash=password_hash)
        return "User registered successfully"

    async def login(self, email: str, password: str) -> LoginResponse:
        """Check credentials and mint a token bound to the user's id."""
        user = await self.store.get_user_by_email(email)
        if user is None:
            raise UserNotFound()

        if not verify_password(password, user.password_hash):
            logger.info("Rejected login for user %s", user.id)
            raise InvalidCredentials()

        token = create_access_token(
            user_id=user.id,
            secret_key=self.settings.secret_key,
            algorithm=self.settings.algorithm,
            expires_delta=timedelta(minutes=self.settings.access_token_expire_minutes),
        )

        return LoginResponse(
            token=token,
            user=UserResponse(id=user.id, name=user.name, email=user.email),
        )

    def verify_token(self, token: Optional[str]) -> str:
        """Return the user id carried by a valid token."""
        if not token:
            raise Unauthenticated("No token, authorization denied")

        token_data = decode_access_token(
            token, self.settings.secret_key, self.settings.algorithm
        )
        if token_data is None:
            raise Unauthenticated("Token is not valid")

        return token_data.user_id

    async def get_profile(self, user_id: str) -> UserResponse:
        user = await self.store.get_user_by_id(user_id)
        if user is None:
            raise Unauthenticated("Token is not valid")
        return UserResponse(id=user.id, name=user.name, email=user.email)


def get_auth_service(
    settings: Settings = Depends(get_app_settings),
    store: FirestoreService = Depends(get_firestore_service),
) -> AuthService:
    return AuthService(settings, store)
