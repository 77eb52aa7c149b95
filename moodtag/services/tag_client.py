import math
from typing import Any, Dict, List, Optional
from ..models.tag_models import Tag
from ..core.logging import get_logger
from .analysis_client import AnalysisClient, ImageInput

logger = get_logger("tag-client")

TAGS_KEY = "tags"
NAME_KEY = "name"
CONFIDENCE_KEY = "confidence"

def _as_confidence(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        confidence = float(value)
    except OverflowError:
        return None
    return confidence if math.isfinite(confidence) else None

def normalize_tag_reply(payload: Any) -> List[Tag]:
    """
    Tags from a decoded vision reply, in reply order.

    Entries without a string name or a numeric confidence are skipped.
    A reply that is not an object with a 'tags' list yields an empty list.
    """
    if not isinstance(payload, dict):
        return []
    entries = payload.get(TAGS_KEY)
    if not isinstance(entries, list):
        logger.info("Reply carries no tag list; no results.")
        return []

    tags = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get(NAME_KEY)
        if not isinstance(name, str) or not name:
            continue
        confidence = _as_confidence(entry.get(CONFIDENCE_KEY))
        if confidence is None:
            continue
        tags.append(Tag(name=name, confidence=confidence))
    return tags

class TagClient(AnalysisClient):
    """Client for the vision endpoint, asking only for content tags."""

    service_name = "tag"

    def request_params(self) -> Dict[str, str]:
        return {"visualFeatures": "Tags"}

    def normalize(self, payload: Any) -> List[Tag]:
        return normalize_tag_reply(payload)

    async def analyze(self, image: ImageInput) -> List[Tag]:
        return await super().analyze(image)
