import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


_ENV_PATH = os.path.join(os.path.dirname(__file__), "..", ".env")
load_dotenv(dotenv_path=_ENV_PATH, override=False)


def _get_env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _get_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


class Settings(BaseModel):
    APP_ENV: str
    DEBUG: bool
    DATA_DIR: str
    DRAFT_AUTOSAVE: bool
    DEFAULT_JURISDICTION: str

    @property
    def drafts_dir(self) -> str:
        return os.path.join(self.DATA_DIR, "drafts")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        APP_ENV=_get_env("APP_ENV", "development"),
        DEBUG=_get_bool("DEBUG", True),
        DATA_DIR=_get_env("DATA_DIR", "data"),
        DRAFT_AUTOSAVE=_get_bool("DRAFT_AUTOSAVE", True),
        DEFAULT_JURISDICTION=_get_env("DEFAULT_JURISDICTION", "Gujarat"),
    )


settings = get_settings()
