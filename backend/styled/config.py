"""
Configuration management for the Styled backend
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

"""Application settings and configuration"""
class Settings:

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./styled.db")

    # Frontend URL (for CORS)
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Hosted auth provider (JWTs are verified, never issued here)
    AUTH_JWT_SECRET: str = os.getenv("AUTH_JWT_SECRET", "")
    AUTH_JWT_AUDIENCE: str = os.getenv("AUTH_JWT_AUDIENCE", "authenticated")

    # Google Gemini Configuration (outfit generation + image classification)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite")
    GEMINI_VISION_MODEL: str = os.getenv("GEMINI_VISION_MODEL", "gemini-2.0-flash")
    GEMINI_TIMEOUT: float = float(os.getenv("GEMINI_TIMEOUT", "30"))

    # OpenWeatherMap Configuration
    OPENWEATHER_API_KEY: str = os.getenv("OPENWEATHER_API_KEY", "")
    WEATHER_TIMEOUT: float = float(os.getenv("WEATHER_TIMEOUT", "5"))
    WEATHER_CACHE_TTL: int = int(os.getenv("WEATHER_CACHE_TTL", "600"))  # 10 minutes

    # Google Calendar window
    CALENDAR_LOOKAHEAD_DAYS: int = int(os.getenv("CALENDAR_LOOKAHEAD_DAYS", "7"))
    CALENDAR_MAX_RESULTS: int = int(os.getenv("CALENDAR_MAX_RESULTS", "20"))

    # Cloudinary Configuration
    CLOUDINARY_CLOUD_NAME: str = os.getenv("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY: str = os.getenv("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET: str = os.getenv("CLOUDINARY_API_SECRET", "")
    CLOUDINARY_FOLDER: str = os.getenv("CLOUDINARY_FOLDER", "styled_closet")
    CLOUDINARY_INSPO_FOLDER: str = os.getenv("CLOUDINARY_INSPO_FOLDER", "styled_inspo")

    # Feature flags
    USE_CLOUDINARY: bool = os.getenv("USE_CLOUDINARY", "true").lower() == "true"

    # Redis is optional; in-memory TTL caches are used without it
    REDIS_URL: str = os.getenv("REDIS_URL", "")

    # Rate limit applied to AI-backed endpoints (slowapi syntax)
    AI_RATE_LIMIT: str = os.getenv("AI_RATE_LIMIT", "10/minute")

    """Check if Cloudinary is properly configured"""
    @property
    def cloudinary_configured(self) -> bool:
        return bool(
            self.CLOUDINARY_CLOUD_NAME
            and self.CLOUDINARY_API_KEY
            and self.CLOUDINARY_API_SECRET
        )

    @property
    def gemini_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY)

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("development", "dev", "local")

    def get_allowed_origins(self) -> list:
        """Comma-separated CORS_ORIGINS wins, otherwise localhost plus FRONTEND_URL"""
        if self.CORS_ORIGINS:
            return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return [
            "http://localhost:3000",
            "http://localhost:3001",
            "https://styled-ai.vercel.app",
            self.FRONTEND_URL,
        ]

settings = Settings()
