"""
Firestore database service.
"""
import hashlib
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from fastapi import Request
from google.api_core.exceptions import AlreadyExists
from google.cloud import firestore
from google.oauth2 import service_account

from todolist.config import Settings
from todolist.errors import Conflict
from todolist.models.user import UserInDB
from todolist.models.todo import TodoInDB

logger = logging.getLogger(__name__)

USERS = "users"
USER_EMAILS = "user_emails"
TODOS = "todos"


def build_firestore_client(settings: Settings) -> firestore.Client:
    """Create a Firestore client from settings."""
    if settings.google_application_credentials:
        credentials = service_account.Credentials.from_service_account_file(
            settings.google_application_credentials
        )
        return firestore.Client(
            project=settings.gcp_project_id or None,
            credentials=credentials
        )
    # Default credentials (gcloud auth, or FIRESTORE_EMULATOR_HOST)
    return firestore.Client(project=settings.gcp_project_id or None)


def _email_key(email: str) -> str:
    # Emails may contain characters that are not valid in document ids
    return hashlib.sha256(email.encode("utf-8")).hexdigest()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FirestoreService:
    """Service for Firestore database operations."""

    def __init__(self, db: firestore.Client):
        self.db = db

    # ==================== User Operations ====================

    async def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
    ) -> UserInDB:
        """
        Create a new user.

        The email is claimed in a lookup collection in the same batch as the
        user document. ``create`` fails the whole batch if the claim exists, so
        two registrations cannot share an email and a failed write leaves
        neither document behind.
        """
        user_id = str(uuid.uuid4())
        user_data = {
            "id": user_id,
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "created_at": _utcnow(),
        }

        batch = self.db.batch()
        batch.create(
            self.db.collection(USER_EMAILS).document(_email_key(email)),
            {"email": email, "user_id": user_id},
        )
        batch.set(self.db.collection(USERS).document(user_id), user_data)
        try:
            batch.commit()
        except AlreadyExists:
            raise Conflict()

        logger.info("Created user %s", user_id)

        return UserInDB(**user_data)

    async def get_user_by_id(self, user_id: str) -> Optional[UserInDB]:
        """Get user by ID."""
        doc = self.db.collection(USERS).document(user_id).get()
        if doc.exists:
            return UserInDB(**doc.to_dict())
        return None

    async def get_user_by_email(self, email: str) -> Optional[UserInDB]:
        """Get user by email."""
        query = self.db.collection(USERS).where("email", "==", email).limit(1)
        docs = query.stream()

        for doc in docs:
            return UserInDB(**doc.to_dict())
        return None

    # ==================== Todo Operations ====================

    async def create_todo(self, user_id: str, title: str) -> TodoInDB:
        """Create a new todo."""
        todo_id = str(uuid.uuid4())
        todo_data = {
            "id": todo_id,
            "user_id": user_id,
            "title": title,
            "completed": False,
            "created_at": _utcnow(),
        }

        self.db.collection(TODOS).document(todo_id).set(todo_data)

        return TodoInDB(**todo_data)

    async def get_todo_by_id(self, todo_id: str) -> Optional[TodoInDB]:
        """Get todo by ID."""
        doc = self.db.collection(TODOS).document(todo_id).get()
        if doc.exists:
            return TodoInDB(**doc.to_dict())
        return None

    async def list_todos_by_user(self, user_id: str) -> List[TodoInDB]:
        """Get all todos owned by a user, oldest first."""
        # Sorted here: where + order_by on another field needs a composite index
        query = self.db.collection(TODOS).where("user_id", "==", user_id)
        todos = [TodoInDB(**doc.to_dict()) for doc in query.stream()]
        todos.sort(key=lambda todo: todo.created_at)
        return todos

    async def update_todo(self, todo_id: str, fields: Dict[str, Any]) -> bool:
        """Update todo fields."""
        doc_ref = self.db.collection(TODOS).document(todo_id)
        doc = doc_ref.get()
        if not doc.exists:
            return False

        if fields:
            doc_ref.update(fields)
        return True

    async def delete_todo(self, todo_id: str) -> bool:
        """Delete a todo."""
        doc_ref = self.db.collection(TODOS).document(todo_id)
        doc = doc_ref.get()
        if not doc.exists:
            return False

        doc_ref.delete()
        return True


def get_firestore_service(request: Request) -> FirestoreService:
    """
    Dependency providing the store.

    The client is created on first use from the application's settings and
    kept on ``app.state`` for later requests.
    """
    db = getattr(request.app.state, "firestore", None)
    if db is None:
        db = build_firestore_client(request.app.state.settings)
        request.app.state.firestore = db
    return FirestoreService(db)
