from pydantic import BaseModel, Field

class TranscriptSegment(BaseModel):
    start: int = Field(ge=0)
    duration: int = Field(ge=0)
    text: str
