import logging

from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.schemas.todo import CreateUpdateTodo, TodoCreated, TodoOut
from todo_api.services import responses

logger = logging.getLogger(__name__)

class TodoService:
    def __init__(self):
        self.repo = TodoRepository()

    async def list_todos(self, db: AsyncSession) -> Response:
        try:
            rows = await self.repo.list(db)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to get todos")
        return responses.ok_list([TodoOut.model_validate(r) for r in rows])

    async def list_auth_todos(self, db: AsyncSession, auth_id: int) -> Response:
        try:
            rows = await self.repo.list_by_creator(db, auth_id)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to get auth's todos")
        return responses.ok_list([TodoOut.model_validate(r) for r in rows])

    async def get_todo(self, db: AsyncSession, todo_id: int) -> Response:
        try:
            row = await self.repo.get(db, todo_id)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to get todo")
        return responses.ok(TodoOut.model_validate(row))

    async def create_todo(self, db: AsyncSession, auth_id: int, todo_in: CreateUpdateTodo) -> Response:
        errors = todo_in.validate_fields()
        if errors:
            return responses.invalid(errors)
        try:
            row = await self.repo.create(db, auth_id, todo_in)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to create todo")
        return responses.ok(TodoCreated.model_validate(row))

    async def update_todo(self, db: AsyncSession, todo_id: int, todo_in: CreateUpdateTodo) -> Response:
        errors = todo_in.validate_fields()
        if errors:
            return responses.invalid(errors)
        try:
            row = await self.repo.update(db, todo_id, todo_in)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to update todo")
        return responses.ok(CreateUpdateTodo.model_validate(row))

    async def delete_todo(self, db: AsyncSession, todo_id: int) -> Response:
        try:
            row = await self.repo.delete(db, todo_id)
        except responses.STORE_ERRORS:
            logger.exception("Error deleting todo %s", todo_id)
            return responses.store_failure("Failed to delete todo")
        return responses.ok(TodoOut.model_validate(row))
