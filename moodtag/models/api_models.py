from pydantic import BaseModel, ConfigDict, Field
from typing import List
from .emotion_models import Emotion, Rectangle
from .tag_models import Tag

class EmojiSticker(BaseModel):
    """
    Response item for one detected face: where it is, what it feels,
    and an emoji a front-end can paste over it.
    """
    rectangle: Rectangle
    emotion: Emotion
    emoji: str

class EmotionAnalysisResponse(BaseModel):
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "results": [
                {
                    "rectangle": {"left": 0, "top": 0, "width": 100, "height": 100},
                    "emotion": "happiness",
                    "emoji": "😀"
                }
            ]
        }
    })

    results: List[EmojiSticker] = Field(default_factory=list, description="One entry per face, in detection order.")

class TagAnalysisResponse(BaseModel):
    tags: List[Tag] = Field(default_factory=list)
    hashtags: str = Field("", description="Tags rendered as a share text, e.g. '#grass #outdoor'.")
