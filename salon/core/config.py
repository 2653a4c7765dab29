from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BACKEND_URL: str = "http://localhost:8001"
    API_PREFIX: str = "/api"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    CACHE_TTL_SECONDS: float = 300.0

    DEFAULT_LOCALE: str = "de"
    BUSINESS_TIMEZONE: str = "Europe/Zurich"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    USE_DEV_BACKEND: bool = False


settings = Settings()
