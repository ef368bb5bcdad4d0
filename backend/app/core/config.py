from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///./materials.db"
    auto_create_tables: bool = True

    # OpenAI
    openai_api_key: str = ""

    # Cloudflare Workers AI
    cloudflare_account_id: str = ""
    cloudflare_api_token: str = ""

    # Models (ids from the model registry)
    default_model: str = "gpt-4o-mini"
    selector_model: str | None = None  # title selection stage override
    responder_model: str | None = None  # final answer stage override

    # Number of trailing history turns the title selector sees (0 = message only)
    selector_history_turns: int = 0

    # Client
    course_name: str = "CS-109"
    # Origins allowed by CORS (CORS_ORIGINS env var as a JSON list)
    cors_origins: list[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]

    # Upload settings
    upload_dir: str = "uploads"
    max_upload_size: int = 10 * 1024 * 1024  # 10MB
    content_preview_length: int = 100

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
