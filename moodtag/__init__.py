from moodtag.core.errors import (
    AnalysisError, ConfigurationError, EmptyResponseError,
    ImageEncodingError, ParseError, TransportError,
)
from moodtag.models.emotion_models import Emotion, EmotionResult, Rectangle
from moodtag.models.tag_models import Tag
from moodtag.services.emotion_client import EmotionClient
from moodtag.services.tag_client import TagClient

__version__ = "1.0.0"
