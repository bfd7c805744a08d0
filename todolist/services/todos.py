"""
Todo operations scoped to the owning user.
"""
import logging
from typing import List, Optional

from fastapi import Depends

from todolist.errors import Forbidden, TodoNotFound
from todolist.models.todo import TodoInDB
from todolist.services.firestore import FirestoreService, get_firestore_service

logger = logging.getLogger(__name__)


class TodoService:
    """CRUD over the todo collection for one requesting user at a time."""

    def __init__(self, store: FirestoreService):
        self.store = store

    async def list(self, owner_id: str) -> List[TodoInDB]:
        return await self.store.list_todos_by_user(owner_id)

    async def create(self, owner_id: str, title: str) -> TodoInDB:
        return await self.store.create_todo(user_id=owner_id, title=title)

    async def _get_owned(self, owner_id: str, todo_id: str) -> TodoInDB:
        """Fetch a todo, raising TodoNotFound or Forbidden."""
        todo = await self.store.get_todo_by_id(todo_id)
        if todo is None:
            raise TodoNotFound()

        if todo.user_id != owner_id:
            logger.warning("User %s denied access to todo %s", owner_id, todo_id)
            raise Forbidden()

        return todo

    async def update(
        self, owner_id: str, todo_id: str, completed: Optional[bool] = None
    ) -> TodoInDB:
        """Set the completed flag when given; otherwise leave the todo as is."""
        todo = await self._get_owned(owner_id, todo_id)

        if completed is not None:
            updated = await self.store.update_todo(todo_id, {"completed": completed})
            if not updated:
                # Deleted since it was read
                raise TodoNotFound()
            todo = todo.model_copy(update={"completed": completed})

        return todo

    async def delete(self, owner_id: str, todo_id: str) -> str:
        await self._get_owned(owner_id, todo_id)
        await self.store.delete_todo(todo_id)
        return "Todo deleted"


def get_todo_service(
    store: FirestoreService = Depends(get_firestore_service),
) -> TodoService:
    return TodoService(store)
