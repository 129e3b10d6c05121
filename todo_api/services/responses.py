from typing import List

from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from todo_api.schemas.validation import FieldError

# asyncpg raises OSError subclasses directly when a connection cannot be opened
STORE_ERRORS = (SQLAlchemyError, OSError)


def ok(model: BaseModel) -> JSONResponse:
    return JSONResponse(model.model_dump())


def ok_list(models: List[BaseModel]) -> JSONResponse:
    return JSONResponse([m.model_dump() for m in models])


def store_failure(message: str) -> JSONResponse:
    return JSONResponse(message, status_code=500)


def invalid(errors: List[FieldError]) -> PlainTextResponse:
    # validation failures are reported with 200 for compatibility with existing clients
    return PlainTextResponse(errors[0].message, status_code=200)


def unauthorized() -> Response:
    return Response(status_code=401)
