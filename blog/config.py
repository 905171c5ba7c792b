"""
Configuration settings for the blog backend
"""

from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings


WEB_DIR = Path(__file__).resolve().parent / "web"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Server Configuration
    APP_NAME: str = "Blog Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Firebase Configuration
    FIREBASE_CREDENTIALS_PATH: str = "firebase-secrets.json"
    # Support for raw JSON credentials (env var)
    FIREBASE_CREDENTIALS_JSON: str = ""
    FIREBASE_PROJECT_ID: str = ""
    # When set, Firestore traffic goes to the emulator and no credentials are loaded
    FIRESTORE_EMULATOR_HOST: str = ""

    # Browser sign-in (rendered into the login page)
    FIREBASE_WEB_API_KEY: str = ""
    FIREBASE_AUTH_DOMAIN: str = ""

    # Document store layout
    ARTICLES_COLLECTION: str = "articles"

    # Frontend bundle holding index.html
    FRONTEND_BUILD_DIR: str = str(WEB_DIR / "static")

    # Articles API used by the server-rendered pages; empty means in-process
    API_BASE_URL: str = ""

    # CORS Configuration
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    @property
    def allowed_origins_list(self) -> List[str]:
        """Convert comma-separated origins to list"""
        return [
            origin.strip()
            for origin in self.ALLOWED_ORIGINS.split(",")
            if origin.strip()
        ]

    @property
    def frontend_index_path(self) -> Path:
        return Path(self.FRONTEND_BUILD_DIR) / "index.html"

    model_config = {"env_file": ".env",
                    "case_sensitive": True, "extra": "allow"}


# Global settings instance
settings = Settings()
