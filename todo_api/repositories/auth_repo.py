from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from todo_api.models.auth import Auth
from todo_api.schemas.auth import AuthIn

AUTH_COLUMNS = (Auth.id, Auth.name, Auth.email, Auth.password1, Auth.password2)

class AuthRepository:
    """Every method issues exactly one statement. Single-row methods raise
    ``NoResultFound`` when nothing matches; rows come back as plain dicts."""

    async def list(self, db: AsyncSession):
        result = await db.execute(select(*AUTH_COLUMNS))
        return [dict(r) for r in result.mappings()]

    async def get(self, db: AsyncSession, auth_id: int):
        result = await db.execute(select(*AUTH_COLUMNS).where(Auth.id == auth_id))
        return dict(result.mappings().one())

    async def find_by_email(self, db: AsyncSession, email: str):
        result = await db.execute(select(*AUTH_COLUMNS).where(Auth.email == email))
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def create(self, db: AsyncSession, auth_in: AuthIn):
        stmt = (
            insert(Auth)
            .values(**auth_in.model_dump(exclude={"id"}))
            .returning(*AUTH_COLUMNS)
        )
        result = await db.execute(stmt)
        row = dict(result.mappings().one())
        await db.commit()
        return row

    async def update(self, db: AsyncSession, auth_id: int, auth_in: AuthIn):
        stmt = (
            update(Auth)
            .where(Auth.id == auth_id)
            .values(**auth_in.model_dump(exclude={"id"}))
            .returning(Auth.name, Auth.email)
        )
        result = await db.execute(stmt)
        row = dict(result.mappings().one())
        await db.commit()
        return row

    async def delete(self, db: AsyncSession, auth_id: int):
        stmt = delete(Auth).where(Auth.id == auth_id).returning(Auth.name, Auth.email)
        result = await db.execute(stmt)
        row = dict(result.mappings().one())
        await db.commit()
        return row
