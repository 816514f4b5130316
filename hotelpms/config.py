"""
Application settings
Read from environment variables (and an optional .env file)
"""
from typing import List, Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Basics
    APP_NAME: str = "Hotel PMS"
    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./hotelpms.db"

    # Tokens are issued by the hosted auth provider; we only verify them
    JWT_SECRET: str = "hotelpms-secret-key-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: Optional[str] = None
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    CORS_ORIGINS: List[str] = ["*"]

    # Media upload service (Cloudinary)
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    CLOUDINARY_UPLOAD_FOLDER: str = "hotel_images"
    MEDIA_UPLOAD_TIMEOUT: float = 30.0

    # Gallery limits
    GALLERY_MAX_IMAGES: int = 20
    GALLERY_ALLOWED_TYPES: List[str] = ["image/jpeg", "image/png", "image/webp"]

    # Simulated chat assistant
    CHAT_REPLY_TEMPLATE: str = "You asked about \"{message}\". Here's a helpful response from the AI."

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


# Global settings instance
settings = Settings()
