from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from ..core.errors import ConfigurationError

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
CONTENT_TYPE_HEADER = "Content-Type"
OCTET_STREAM = "application/octet-stream"

class AnalysisRequest(BaseModel):
    """Everything needed to issue one analysis call, independent of any HTTP library."""
    model_config = ConfigDict(frozen=True)

    method: str = "POST"
    url: str
    headers: Dict[str, str]
    params: Dict[str, str] = Field(default_factory=dict)
    body: bytes

def require_credentials(subscription_key: str, endpoint_url: str) -> None:
    """Raises ConfigurationError unless both the key and the endpoint are set."""
    if not subscription_key:
        raise ConfigurationError(
            "No subscription key configured. Set EMOTION_API_KEY / VISION_API_KEY before analysing images."
        )
    if not endpoint_url:
        raise ConfigurationError("No endpoint URL configured for the analysis service.")

def build_request(image_bytes: bytes, subscription_key: str, endpoint_url: str,
                  params: Optional[Dict[str, str]] = None) -> AnalysisRequest:
    """
    Describe a binary image upload to one of the analysis endpoints.

    The key travels as a header and the image as an octet stream body, since the
    endpoints also accept a JSON-wrapped image URL instead.
    Raises ConfigurationError when the key is empty.
    """
    require_credentials(subscription_key, endpoint_url)
    return AnalysisRequest(
        url=endpoint_url,
        headers={
            SUBSCRIPTION_KEY_HEADER: subscription_key,
            CONTENT_TYPE_HEADER: OCTET_STREAM,
        },
        params=dict(params or {}),
        body=image_bytes,
    )
