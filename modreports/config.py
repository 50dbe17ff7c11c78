from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./modreports.db"
    SQL_ECHO: bool = False

    # Pagination
    FETCH_LIMIT_DEFAULT: int = 10
    FETCH_LIMIT_MAX: int = 50

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
