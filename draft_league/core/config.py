from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "NBA Draft League"
    API_V1_STR: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    # Real Sports API credentials, forwarded as request headers
    REAL_AUTH_INFO: Optional[str] = None
    REAL_DEVICE_UUID: Optional[str] = None
    REAL_API_BASE_URL: str = "https://web.realsports.io"
    REAL_VERSION: str = "27"
    REAL_TIMEOUT: float = 30.0

    # Published Google Sheet tabs
    SHEETS_TIMEOUT: float = 5.0

    # Max matchups scored concurrently
    SCORES_BATCH_SIZE: int = 4

    # Optional JSON file replacing the built-in season registry
    SEASONS_FILE: Optional[str] = None

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
