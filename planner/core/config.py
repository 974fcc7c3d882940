from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str
    REDIS_URL: str

    # SMTP transport
    SMTP_HOST: str = "localhost"
    SMTP_PORT: int = 1025
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_SSL: bool = False
    SMTP_TIMEOUT: float = 10.0

    MAIL_FROM_NAME: str = "Planner Team"
    MAIL_FROM_ADDRESS: str = "hello@planner.local"

    # Links in emails point at the API, redirects point at the web app
    API_BASE_URL: str = "http://localhost:3333"
    WEB_BASE_URL: str = "http://localhost:3000"

    TRIP_CACHE_TTL_SECONDS: int = 1800

    LOG_LEVEL: str = "INFO"

    PROJECT_NAME: str = "Planner API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Plan trips and invite friends to join them"

    class Config:
        env_file = ".env"


settings = Settings()
