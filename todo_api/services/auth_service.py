from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession
from todo_api.repositories.auth_repo import AuthRepository
from todo_api.schemas.auth import AuthIn, AuthOut, AuthSummary, Login
from todo_api.services import responses

class AuthService:
    def __init__(self):
        self.repo = AuthRepository()

    async def login(self, db: AsyncSession, login_in: Login) -> Response:
        try:
            row = await self.repo.find_by_email(db, login_in.email)
        except responses.STORE_ERRORS:
            return responses.unauthorized()
        if row is None or row["password1"] != login_in.password:
            return responses.unauthorized()
        return responses.ok(AuthOut.model_validate(row))

    async def list_auths(self, db: AsyncSession) -> Response:
        try:
            rows = await self.repo.list(db)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to get auths")
        return responses.ok_list([AuthOut.model_validate(r) for r in rows])

    async def get_auth(self, db: AsyncSession, auth_id: int) -> Response:
        try:
            row = await self.repo.get(db, auth_id)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to get auth")
        return responses.ok(AuthOut.model_validate(row))

    async def create_auth(self, db: AsyncSession, auth_in: AuthIn) -> Response:
        errors = auth_in.validate_fields()
        if errors:
            return responses.invalid(errors)
        try:
            row = await self.repo.create(db, auth_in)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to create auth")
        return responses.ok(AuthOut.model_validate(row))

    async def update_auth(self, db: AsyncSession, auth_id: int, auth_in: AuthIn) -> Response:
        errors = auth_in.validate_fields()
        if errors:
            return responses.invalid(errors)
        try:
            row = await self.repo.update(db, auth_id, auth_in)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to update auth")
        return responses.ok(AuthSummary.model_validate(row))

    async def delete_auth(self, db: AsyncSession, auth_id: int) -> Response:
        try:
            row = await self.repo.delete(db, auth_id)
        except responses.STORE_ERRORS:
            return responses.store_failure("Failed to delete auth")
        return responses.ok(AuthSummary.model_validate(row))
