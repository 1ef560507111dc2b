import json
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Bus Reservation System'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Enables IO debug logs and the rotating file sink

    # Ledger limits
    MAX_BUSES: int = 25
    TICKET_ID_MAX_ATTEMPTS: int = 10  # Re-rolls when a generated ID is already issued

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        return v

    @field_validator('MAX_BUSES', 'TICKET_ID_MAX_ATTEMPTS')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError('must be at least 1')
        return v


settings = Settings()  # type: ignore
