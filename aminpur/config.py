# aminpur/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices


class Settings(BaseSettings):
    # read .env, ignore unknown keys
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    # Local store
    DATABASE_URL: str = "sqlite:///./aminpur.db"

    # Admin (a plain string match, not an auth system)
    ADMIN_USERNAME: str = "mirrabbihossain"
    ADMIN_PASSWORD: str = Field(
        default="Rabbi@198027",
        validation_alias=AliasChoices("ADMIN_PASSWORD", "admin_password"),
    )

    # Session cookie
    SECRET_KEY: str = "dev-secret"
    COOKIE_NAME: str = "aminpur_session"
    COOKIE_SECURE: bool = False
    COOKIE_SAMESITE: str = "lax"

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # GitHub mirror; env values only seed the config when nothing is stored yet
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_RAW_URL: str = "https://raw.githubusercontent.com"
    GITHUB_TOKEN: str | None = None
    GITHUB_OWNER: str | None = None
    GITHUB_REPO: str | None = None
    GITHUB_PATH: str = "data.json"
    GITHUB_BRANCH: str = "main"
    LOAD_REMOTE_ON_STARTUP: bool = True

    # Gemini
    GEMINI_API_KEY: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta"

    SNAPSHOT_VERSION: str = "2.0"
    LOG_LEVEL: str = "INFO"


settings = Settings()
