"""Service settings for the HTTP API — read from the environment / ``.env``.

Only the server entry point reads these.  The calculator itself is
configured by ``CalculatorConfig`` and never looks at the environment.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    API_TITLE: str = "Trip Fuel Calculator API"
    API_VERSION: str = "1.0"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = False

    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
