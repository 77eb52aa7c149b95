import random
from typing import Dict, Iterable, List, Optional
from ..models.emotion_models import Emotion
from ..models.tag_models import Tag

EMOJI_CATALOG: Dict[Emotion, List[str]] = {
    Emotion.Anger: ["😡", "😠"],
    Emotion.Contempt: ["😤"],
    Emotion.Disgust: ["😷", "🤐"],
    Emotion.Fear: ["😱"],
    Emotion.Happiness: ["😝", "😀", "😃", "😄", "😆", "😊", "🙂", "☺️"],
    Emotion.Neutral: ["😶", "😐", "😑"],
    Emotion.Sadness: ["🙁", "😞", "😟", "😔", "😢", "😭"],
    Emotion.Surprise: ["😳", "😮", "😲"],
}

def pick_emoji(emotion: Emotion, rng: Optional[random.Random] = None) -> str:
    """A random emoji expressing the given emotion."""
    return (rng or random).choice(EMOJI_CATALOG[emotion])

def compose_hashtags(tags: Iterable[Tag]) -> str:
    """Share text for a list of tags: '#name' per tag, separated by single spaces."""
    return " ".join(f"#{tag.name}" for tag in tags)
