from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.schemas.auth import AuthIn, Login
from todo_api.services.auth_service import AuthService
from todo_api.database import get_db

router = APIRouter(tags=["Auths"])
service = AuthService()

@router.post("/auth/login")
async def login(login_in: Login, db: AsyncSession = Depends(get_db)):
    return await service.login(db, login_in)

@router.get("/auths")
async def get_auths(db: AsyncSession = Depends(get_db)):
    return await service.list_auths(db)

@router.get("/auths/{auth_id}")
async def get_auth(auth_id: int, db: AsyncSession = Depends(get_db)):
    return await service.get_auth(db, auth_id)

@router.post("/auths")
async def add_auth(auth_in: AuthIn, db: AsyncSession = Depends(get_db)):
    return await service.create_auth(db, auth_in)

@router.patch("/updateauth/{auth_id}")
async def update_auth(auth_id: int, auth_in: AuthIn, db: AsyncSession = Depends(get_db)):
    return await service.update_auth(db, auth_id, auth_in)

@router.delete("/delete/{auth_id}")
async def delete_auth(auth_id: int, db: AsyncSession = Depends(get_db)):
    return await service.delete_auth(db, auth_id)
