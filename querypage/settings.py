from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    # Database settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./querypage.db"
    DB_ECHO: bool = False

    # Pagination settings
    # Hard upper bound lives in querypage/constants.py (MAX_PAGE_SIZE)
    DEFAULT_PAGE_SIZE: int = 20

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/querypage.log"
    ENVIRONMENT: str = "development"


app_settings = Settings()
