from pydantic import BaseModel
from typing import Optional

class ParseResponse(BaseModel):
    url: str
    content: Optional[str] = None
