# moodtag/main.py

from fastapi import FastAPI

from moodtag.api.emotion_router import router as emotion_router
from moodtag.api.tag_router import router as tag_router

from moodtag.core.logging import get_logger

logger = get_logger("moodtag-base")

app = FastAPI(
    title="Moodtag photo analysis",
    description="FastAPI application that runs photos through emotion recognition and image tagging and returns emoji and hashtag suggestions.",
    version="1.0.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    }
)

@app.get("/")
def index():
    return "Welcome to the Moodtag photo analysis API"

app.include_router(emotion_router)
app.include_router(tag_router)
