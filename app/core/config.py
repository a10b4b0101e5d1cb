from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Room Booking Service"
    VERSION: str = "0.1.0"

    # Server
    PORT: int = 3000
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"
    ERROR_LOG_PATH: str = "logs/errors.log"  # empty disables the error file sink

    # Rooms registered at startup (JSON list, same shape as POST /rooms)
    ROOMS_SEED_PATH: str = ""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

settings = Settings()
