from pydantic import BaseModel, ConfigDict

class Tag(BaseModel):
    """A content tag the vision service attached to an image."""
    model_config = ConfigDict(frozen=True)

    name: str
    confidence: float
