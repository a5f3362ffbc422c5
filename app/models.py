from typing import Optional
from pydantic import BaseModel

class FetchRequest(BaseModel):
    url: Optional[str] = None

class FetchResponse(BaseModel):
    success: bool
    content: str
    title: str
    originalUrl: str

class ErrorResponse(BaseModel):
    error: str
