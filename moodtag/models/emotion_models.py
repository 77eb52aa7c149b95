from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class Emotion(str, Enum):
    """
    The eight emotions the recognition service scores for every face.

    Member order is significant: it is the order in which scores are
    compared, so on a tie the earlier member wins.
    """
    Anger = "anger"
    Contempt = "contempt"
    Disgust = "disgust"
    Fear = "fear"
    Happiness = "happiness"
    Neutral = "neutral"
    Sadness = "sadness"
    Surprise = "surprise"

class Rectangle(BaseModel):
    """
    Face bounding box in pixel coordinates of the submitted image,
    origin at the top-left corner.
    """
    model_config = ConfigDict(frozen=True)

    left: int = Field(..., ge=0)
    top: int = Field(..., ge=0)
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

class EmotionResult(BaseModel):
    """One detected face paired with its single most likely emotion."""
    model_config = ConfigDict(frozen=True)

    rectangle: Rectangle
    emotion: Emotion
