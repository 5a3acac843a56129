from pydantic_settings import BaseSettings, SettingsConfigDict
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="INTEGRATION_", env_file=".env", extra="ignore")
    DATABASE_URL: str = "sqlite:///./integration.db"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    SECRET_KEY: str = "change-me"
    SITE_PASSWORD: str | None = None
    ACCESS_COOKIE_HOURS: int = 24

    # public URL used in follow-up links sent to leaders
    APP_URL: str | None = None
    DEFAULT_COUNTRY_CODE: str = "33"
    CLOSEST_FAMILIES_LIMIT: int = 3
settings = Settings()
