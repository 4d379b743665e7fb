from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "HOMESAVER_"}

    # App
    app_name: str = "Homesaver"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Comma-separated list of origins allowed to call the API (the marketing site)
    allow_origins: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.allow_origins.split(",") if o.strip()]
        return origins or ["*"]


settings = Settings()
