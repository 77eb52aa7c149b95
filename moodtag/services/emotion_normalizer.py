import math
from typing import Any, Dict, List, Optional
from ..models.emotion_models import Emotion, EmotionResult, Rectangle
from ..core.logging import get_logger

logger = get_logger("emotion-normalizer")

FACE_RECTANGLE_KEY = "faceRectangle"
SCORES_KEY = "scores"
RECTANGLE_KEYS = ("top", "left", "height", "width")

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _as_score(value: Any) -> Optional[float]:
    """Finite float for a JSON number, or None for anything else, including ints too large for a float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        score = float(value)
    except OverflowError:
        return None
    return score if math.isfinite(score) else None

def extract_rectangle(hit: Dict[str, Any]) -> Optional[Rectangle]:
    """Rectangle for one hit, or None unless all four coordinates are non-negative integers."""
    frame = hit.get(FACE_RECTANGLE_KEY)
    if not isinstance(frame, dict):
        return None
    values = [frame.get(key) for key in RECTANGLE_KEYS]
    if not all(_is_int(v) and v >= 0 for v in values):
        return None
    top, left, height, width = values
    return Rectangle(left=left, top=top, width=width, height=height)

def extract_scores(hit: Dict[str, Any]) -> Optional[Dict[Emotion, float]]:
    """Score per emotion for one hit, or None if any of the eight is missing or not numeric."""
    scores = hit.get(SCORES_KEY)
    if not isinstance(scores, dict):
        return None
    score_set = {}
    for emotion in Emotion:
        score = _as_score(scores.get(emotion.value))
        if score is None:
            return None
        score_set[emotion] = score
    return score_set

def most_likely_emotion(score_set: Dict[Emotion, float]) -> Optional[Emotion]:
    """
    Arg-max over the score set in Emotion declaration order.

    The running maximum starts at 0.0 and only moves on a strictly greater
    score, so ties go to the earlier emotion and a set with no positive
    score has no winner at all.
    """
    winner = None
    maximum = 0.0
    for emotion in Emotion:
        score = score_set[emotion]
        if score > maximum:
            maximum = score
            winner = emotion
    return winner

def normalize_hit(hit: Any) -> Optional[EmotionResult]:
    if not isinstance(hit, dict):
        return None
    rectangle = extract_rectangle(hit)
    score_set = extract_scores(hit)
    emotion = most_likely_emotion(score_set) if score_set is not None else None
    if rectangle is None or emotion is None:
        return None
    return EmotionResult(rectangle=rectangle, emotion=emotion)

def normalize_emotion_reply(payload: Any) -> List[EmotionResult]:
    """
    Turn a decoded recognition reply into results, one per usable face.

    Hits without a complete rectangle or a complete, decisive score set are
    skipped; the rest keep their reply order. Anything other than a top-level
    array yields an empty list. Never raises.
    """
    if not isinstance(payload, list):
        logger.info(f"Reply is a {type(payload).__name__}, not a list of faces; no results.")
        return []

    results = []
    for index, hit in enumerate(payload):
        result = normalize_hit(hit)
        if result is None:
            logger.debug(f"Skipping incomplete face entry at index {index}")
            continue
        results.append(result)
    return results
