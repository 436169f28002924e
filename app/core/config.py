from functools import lru_cache
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ProductPerformanceAnalytics"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Upstream data sources
    UPSTREAM_BASE_URL: str = "http://localhost:5000"
    analytics_path: str = "/api/product-analytics"
    performance_path: str = "/api/product-performance"
    upstream_timeout_s: float = 10.0  # seconds

    # Classification
    saleable_min_units: int = 20       # strictly greater than
    non_saleable_max_units: int = 3    # strictly less than (and > 0)
    top_n: int = 10                    # cap for saleable / non-saleable lists

    # CORS (CSV)
    ALLOWED_ORIGINS: str = ""

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
