from fastapi import HTTPException, status
from ..core.config import get_settings
from ..core.errors import (
    AnalysisError, ConfigurationError, EmptyResponseError,
    ImageEncodingError, ParseError, TransportError,
)
from ..services.emotion_client import EmotionClient
from ..services.tag_client import TagClient

def get_emotion_client() -> EmotionClient:
    settings = get_settings()
    return EmotionClient(
        settings.EMOTION_API_KEY,
        settings.EMOTION_API_URL,
        jpeg_quality=settings.JPEG_QUALITY,
        verify_ssl=settings.VERIFY_SSL,
    )

def get_tag_client() -> TagClient:
    settings = get_settings()
    return TagClient(
        settings.VISION_API_KEY,
        settings.VISION_API_URL,
        jpeg_quality=settings.JPEG_QUALITY,
        verify_ssl=settings.VERIFY_SSL,
    )

def to_http_exception(error: AnalysisError) -> HTTPException:
    """Maps an analysis failure onto the status code the caller should see."""
    if isinstance(error, ConfigurationError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error))
    if isinstance(error, ImageEncodingError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, (TransportError, EmptyResponseError, ParseError)):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
