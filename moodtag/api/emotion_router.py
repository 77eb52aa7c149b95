from fastapi import APIRouter, Depends, File, UploadFile
from ..core.errors import AnalysisError
from ..core.logging import get_logger
from ..models.api_models import EmojiSticker, EmotionAnalysisResponse
from ..services.emotion_client import EmotionClient
from ..services.sharing_services import pick_emoji
from .dependencies import get_emotion_client, to_http_exception

router = APIRouter(
    prefix="/emotions",
    tags=["Emotions"],
)
logger = get_logger("emotion-endpoints")

@router.post(
    "",
    response_model=EmotionAnalysisResponse,
    response_description="Detected faces with their most likely emotion",
    summary="Emoji Me",
)
async def analyze_emotions(
    image: UploadFile = File(..., description="Photo to analyse, in any common image format."),
    client: EmotionClient = Depends(get_emotion_client),
):
    """
    Sends the uploaded photo to the emotion recognition service and returns one
    entry per detected face, each with an emoji suggestion to place over it.
    """
    image_bytes = await image.read()
    logger.info(f"Emotion analysis requested for '{image.filename}' ({len(image_bytes)} bytes)")
    try:
        results = await client.analyze(image_bytes)
    except AnalysisError as e:
        raise to_http_exception(e)

    return EmotionAnalysisResponse(results=[
        EmojiSticker(rectangle=r.rectangle, emotion=r.emotion, emoji=pick_emoji(r.emotion))
        for r in results
    ])
