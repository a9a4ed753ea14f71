from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = "sqlite:///./database.db"

    # Store settings
    STORE_BACKEND: str = "sql"  # sql | memory

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    MAX_CONNECTIONS: int = 100
    TIMEOUT_KEEP_ALIVE: int = 10

    # Logging settings
    LOG_LEVEL: str = "INFO"

    # Read from .env, silently ignore variables this class doesn't declare
    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
