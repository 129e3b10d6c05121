from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.schemas.todo import CreateUpdateTodo
from todo_api.services.todo_service import TodoService
from todo_api.database import get_db

router = APIRouter(tags=["Todos"])
service = TodoService()

@router.get("/todos")
async def get_todos(db: AsyncSession = Depends(get_db)):
    return await service.list_todos(db)

@router.get("/auth/{auth_id}/todos")
async def get_auth_todos(auth_id: int, db: AsyncSession = Depends(get_db)):
    return await service.list_auth_todos(db, auth_id)

@router.get("/todos/{todo_id}")
async def get_todo(todo_id: int, db: AsyncSession = Depends(get_db)):
    return await service.get_todo(db, todo_id)

@router.post("/auth/{auth_id}/todos")
async def create_todo(auth_id: int, todo_in: CreateUpdateTodo, db: AsyncSession = Depends(get_db)):
    return await service.create_todo(db, auth_id, todo_in)

@router.patch("/updatetodo/{todo_id}")
async def update_todo(todo_id: int, todo_in: CreateUpdateTodo, db: AsyncSession = Depends(get_db)):
    return await service.update_todo(db, todo_id, todo_in)

@router.delete("/delete_todo/{todo_id}")
async def delete_todo(todo_id: int, db: AsyncSession = Depends(get_db)):
    return await service.delete_todo(db, todo_id)
