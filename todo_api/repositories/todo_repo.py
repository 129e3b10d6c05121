from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from todo_api.models.todo import Todo
from todo_api.schemas.todo import CreateUpdateTodo

TODO_COLUMNS = (Todo.id, Todo.title, Todo.content, Todo.creator)

class TodoRepository:
    async def list(self, db: AsyncSession):
        result = await db.execute(select(*TODO_COLUMNS))
        return [dict(r) for r in result.mappings()]

    async def list_by_creator(self, db: AsyncSession, creator: int):
        result = await db.execute(select(*TODO_COLUMNS).where(Todo.creator == creator))
        return [dict(r) for r in result.mappings()]

    async def get(self, db: AsyncSession, todo_id: int):
        result = await db.execute(select(*TODO_COLUMNS).where(Todo.id == todo_id))
        return dict(result.mappings().one())

    async def create(self, db: AsyncSession, creator: int, todo_in: CreateUpdateTodo):
        stmt = (
            insert(Todo)
            .values(title=todo_in.title, content=todo_in.content, creator=creator)
            .returning(Todo.title, Todo.content, Todo.creator)
        )
        result = await db.execute(stmt)
        row = dict(result.mappings().one())
        await db.commit()
        return row

    async def update(self, db: AsyncSession, todo_id: int, todo_in: CreateUpdateTodo):
        stmt = (
            update(Todo)
            .where(Todo.id == todo_id)
            .values(title=todo_in.title, content=todo_in.content)
            .returning(Todo.title, Todo.content)
        )
        result = await db.execute(stmt)
        row = dict(result.mappings().one())
        await db.commit()
        return row

    async def delete(self, db: AsyncSession, todo_id: int):
        stmt = delete(Todo).where(Todo.id == todo_id).returning(*TODO_COLUMNS)
        result = await db.execute(stmt)
        row = dict(result.mappings().one())
        await db.commit()
        return row
