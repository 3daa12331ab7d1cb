from pydantic_settings import BaseSettings
from typing import Optional, List
from urllib.parse import quote_plus
import os

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "EasyDoc Appointment API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Database - MongoDB Atlas credentials, or an explicit URI
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    DB_HOST: str = "cluster0.px56e.mongodb.net"
    MONGODB_URI: Optional[str] = None
    DATABASE_NAME: str = "easyDoc"
    MONGODB_TIMEOUT_MS: int = 5000

    # Collections
    USERS_COLLECTION: str = "users"
    DOCTORS_COLLECTION: str = "doctors"
    APPOINTMENTS_COLLECTION: str = "appointments"

    # Security
    ACCESS_TOKEN_SECRET: str = "your-secret-key-change-this-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 5

    # Doctors
    TOP_RATED_LIMIT: int = 8

    # CORS
    ALLOWED_ORIGINS: List[str] = ["*"]

    @property
    def get_database_url(self) -> str:
        """Return the MongoDB URI, building the Atlas one from credentials if needed."""
        if self.MONGODB_URI:
            return self.MONGODB_URI
        if self.DB_USER and self.DB_PASS:
            return (
                f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
                f"@{self.DB_HOST}/?retryWrites=true&w=majority&appName=Cluster0"
            )
        return "mongodb://localhost:27017"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

# Create settings instance
settings = Settings()
