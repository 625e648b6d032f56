# config.py
import os


class Config:
    API_VERSION = os.environ.get("API_VERSION", "1.0.0")
    # Comma separated list of allowed origins, "*" allows all
    CORS_ORIGINS = [origin.strip() for origin in os.environ.get("CORS_ORIGINS", "*").split(",") if origin.strip()]
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "5000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
