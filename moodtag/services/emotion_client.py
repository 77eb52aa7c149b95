from typing import Any, List
from ..models.emotion_models import EmotionResult
from .analysis_client import AnalysisClient, ImageInput
from .emotion_normalizer import normalize_emotion_reply

class EmotionClient(AnalysisClient):
    """
    Client for the emotion recognition endpoint.

    Usage:
        client = EmotionClient(subscription_key, settings.EMOTION_API_URL)
        results = await client.analyze(image_bytes)
    """

    service_name = "emotion"

    def normalize(self, payload: Any) -> List[EmotionResult]:
        return normalize_emotion_reply(payload)

    async def analyze(self, image: ImageInput) -> List[EmotionResult]:
        """Most likely emotion for every face found in the image, in detection order."""
        return await super().analyze(image)
