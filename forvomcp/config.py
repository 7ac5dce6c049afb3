from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from forvomcp.models import DEFAULT_BASE_URL


class Settings(BaseSettings):
    # Core Settings
    api_key: str | None = Field(None, description="Forvo API Key")
    base_url: str = Field(DEFAULT_BASE_URL, description="Forvo API endpoint")
    timeout_seconds: float = Field(30.0, description="HTTP timeout in seconds")

    # Logging Settings
    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Enable JSON logging")

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FORVO_", extra="ignore")


settings = Settings()
