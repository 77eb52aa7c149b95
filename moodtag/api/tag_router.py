from fastapi import APIRouter, Depends, File, UploadFile
from ..core.errors import AnalysisError
from ..core.logging import get_logger
from ..models.api_models import TagAnalysisResponse
from ..services.sharing_services import compose_hashtags
from ..services.tag_client import TagClient
from .dependencies import get_tag_client, to_http_exception

router = APIRouter(
    prefix="/tags",
    tags=["Tags"],
)
logger = get_logger("tag-endpoints")

@router.post(
    "",
    response_model=TagAnalysisResponse,
    summary="Tag & Tweet",
)
async def analyze_tags(
    image: UploadFile = File(...),
    client: TagClient = Depends(get_tag_client),
):
    """Content tags for the uploaded photo, plus the same tags as share-ready hashtags."""
    image_bytes = await image.read()
    logger.info(f"Tag analysis requested for '{image.filename}' ({len(image_bytes)} bytes)")
    try:
        tags = await client.analyze(image_bytes)
    except AnalysisError as e:
        raise to_http_exception(e)
    return TagAnalysisResponse(tags=tags, hashtags=compose_hashtags(tags))
