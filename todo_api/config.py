import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 8080
    workers: int = 1
    log_level: str = "INFO"
    create_tables: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            database_url=os.getenv("DATABASE_URL"),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            workers=int(os.getenv("WORKERS", cls.workers)),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            create_tables=_env_bool("DB_CREATE_TABLES"),
        )
