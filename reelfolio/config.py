from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PORT: int = 3000
    LOG_LEVEL: str = "info"
    ADMIN_PASSWORD: str = ""
    BLOB_DIR: str = "/data/blobs"
    BLOB_PUBLIC_BASE_URL: str = "/blobs"
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.0-flash"
    CORS_ORIGINS: list[str] = ["*"]


settings = Settings()
