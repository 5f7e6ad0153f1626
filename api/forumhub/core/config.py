from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PASSWORD = "password"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    app_env: str = "development"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    database_url: str = "sqlite+aiosqlite:///./forumhub.db"
    database_echo: bool = False
    create_tables_on_startup: bool = True

    auth_username: str = "user"
    auth_password: str = DEFAULT_PASSWORD
    auth_password_hash: str | None = None
    auth_realm: str = "ForumHub"
    auth_bcrypt_rounds: int = 12

    cors_origins: str = "http://localhost:3000"


settings = Settings()
