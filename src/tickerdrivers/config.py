from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    env: str = Field(default="dev")
    log_level: str = Field(default="INFO")
    log_file: str | None = None
    log_max_bytes: int = Field(default=10 * 1024 * 1024)
    log_backup_count: int = Field(default=5)
    log_json: bool = False
    sentry_dsn: str | None = None

    # Bitquery GraphQL API (fallback when BITQUERY_API_KEY is not set elsewhere)
    bitquery_api_key: str | None = None

    # HTTP client timeout in seconds
    http_timeout: float = Field(default=30.0)

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
