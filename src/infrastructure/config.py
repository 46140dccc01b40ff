from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # --- Core App Settings ---
    FLASK_ENV: str = "production"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # --- Infrastructure ---
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "mindful-insights"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

# Load settings
settings = Settings()

# Production readiness checks
if settings.FLASK_ENV == "production" and settings.DEBUG:
    raise ValueError("CRITICAL: DEBUG mode must be disabled in production.")
