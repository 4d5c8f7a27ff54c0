from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Safe To Splurge API"
    app_env: str = "development"
    log_level: str = "INFO"
    # Applied by the input models only; the engine always receives a resolved buffer.
    default_buffer: Decimal = Decimal("50")
    # Comma-separated origins for CORS.
    cors_allow_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
