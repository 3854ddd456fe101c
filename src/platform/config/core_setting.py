from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import DATA_DIR


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')

_VENDORS = ('biletyna', 'ebilet', 'kupbilecik')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Seat Reconciliation'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # State backend for seat history, stats snapshots and overrides
    STATE_BACKEND: Literal['file', 'kvrocks', 'memory'] = 'file'
    DATA_DIR: Path = DATA_DIR

    # Kvrocks Configuration (Redis protocol + Kvrocks storage)
    KVROCKS_HOST: str = 'localhost'
    KVROCKS_PORT: int = 6666
    KVROCKS_DB: int = 0
    KVROCKS_PASSWORD: str = ''
    REDIS_DECODE_RESPONSES: bool = False  # Records are orjson bytes

    # Kvrocks Connection Pool Configuration
    KVROCKS_POOL_MAX_CONNECTIONS: int = 20
    KVROCKS_POOL_SOCKET_TIMEOUT: int = 10  # Socket read/write timeout (seconds)
    KVROCKS_POOL_SOCKET_CONNECT_TIMEOUT: int = 10  # Connection timeout (seconds)
    KVROCKS_POOL_SOCKET_KEEPALIVE: bool = True
    KVROCKS_POOL_HEALTH_CHECK_INTERVAL: int = 30  # Health check interval (seconds)

    # Reconciliation
    REFERENCE_VENDOR: str = 'kupbilecik'  # Its sectors are the canonical layout
    SCRAPE_CACHE_TTL_SECONDS: float = 300.0
    VENDOR_SCRAPE_TIMEOUT_SECONDS: float = 120.0
    REFRESH_LOCK_TTL_SECONDS: int = 600

    @field_validator('REFERENCE_VENDOR', mode='before')
    @classmethod
    def validate_reference_vendor(cls, v: str) -> str:
        vendor = str(v).strip().lower()
        if vendor not in _VENDORS:
            raise ValueError(f'REFERENCE_VENDOR must be one of {", ".join(_VENDORS)}')
        return vendor


settings = Settings()  # type: ignore
