"""
Todo routes. Every route requires a bearer token.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from todolist.auth.dependencies import get_current_user_id
from todolist.models.todo import TodoCreate, TodoListResponse, TodoResponse, TodoUpdate
from todolist.models.user import MessageResponse
from todolist.services.todos import TodoService, get_todo_service

router = APIRouter()


@router.get("", response_model=TodoListResponse)
async def list_todos(
    current_user_id: str = Depends(get_current_user_id),
    todos: TodoService = Depends(get_todo_service),
):
    """List the current user's todos."""
    items = await todos.list(current_user_id)
    return [TodoResponse(**t.model_dump()) for t in items]


@router.post("", response_model=TodoResponse)
async def create_todo(
    request: TodoCreate,
    current_user_id: str = Depends(get_current_user_id),
    todos: TodoService = Depends(get_todo_service),
):
    """Add a todo for the current user."""
    todo = await todos.create(current_user_id, request.title)
    return TodoResponse(**todo.model_dump())


@router.put("/{todo_id}", response_model=TodoResponse)
async def update_todo(
    todo_id: str,
    request: Optional[TodoUpdate] = None,
    current_user_id: str = Depends(get_current_user_id),
    todos: TodoService = Depends(get_todo_service),
):
    """Mark a todo complete or incomplete."""
    completed = request.completed if request else None
    todo = await todos.update(current_user_id, todo_id, completed=completed)
    return TodoResponse(**todo.model_dump())


@router.delete("/{todo_id}", response_model=MessageResponse)
async def delete_todo(
    todo_id: str,
    current_user_id: str = Depends(get_current_user_id),
    todos: TodoService = Depends(get_todo_service),
):
    """Delete a todo owned by the current user."""
    msg = await todos.delete(current_user_id, todo_id)
    return MessageResponse(msg=msg)
