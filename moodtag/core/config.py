import re
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EMOTION_API_URL = "https://api.projectoxford.ai/emotion/v1.0/recognize"
DEFAULT_VISION_API_URL = "https://api.projectoxford.ai/vision/v1.0/analyze"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    EMOTION_API_KEY: str = ""
    EMOTION_API_URL: str = DEFAULT_EMOTION_API_URL
    VISION_API_KEY: str = ""
    VISION_API_URL: str = DEFAULT_VISION_API_URL
    JPEG_QUALITY: float = 0.9
    VERIFY_SSL: bool = True

    @field_validator('EMOTION_API_URL', 'VISION_API_URL')
    @classmethod
    def valid_endpoint_url(cls, v: str) -> str:
        """Ensures the endpoint is an absolute http(s) URL."""
        if not re.match(r'^https?://[^\s/]+', v):
            raise ValueError(f"'{v}' is not a valid endpoint URL. Expected something like 'https://host/path'.")
        return v

    @field_validator('JPEG_QUALITY')
    @classmethod
    def valid_jpeg_quality(cls, v: float) -> float:
        if not 0.0 < v <= 1.0:
            raise ValueError(f"JPEG quality must be in (0, 1], got {v}.")
        return v

######################################
# Not cached: a changed .env should be picked up by the next request
# without having to restart the service
######################################

def get_settings():
    return Settings()
