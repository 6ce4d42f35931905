from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class SummarizeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    style: Optional[str] = None
    length_key: Optional[str] = Field(default=None, alias="lengthKey")

class SummaryResponse(BaseModel):
    summary: str

class ErrorResponse(BaseModel):
    error: str
