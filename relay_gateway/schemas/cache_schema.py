from pydantic import BaseModel
from typing import List

class SetResponse(BaseModel):
    status: str = "success"

class GetResponse(BaseModel):
    data: str

class KeysResponse(BaseModel):
    keys: List[str]
