import httpx
from fastapi import APIRouter, Depends
from relay_gateway.schemas.parse_schema import ParseResponse
from relay_gateway.controllers.parse_controller import parse_url
from relay_gateway.utils.http_client import get_http_client

router = APIRouter(tags=["Parse"])

@router.get("/parse", response_model=ParseResponse, summary="Fetch the raw content of a URL")
async def parse(url: str = "", client: httpx.AsyncClient = Depends(get_http_client)):
    """
    Fetch `url` once with GET and return its body as text.
    Non-200 answers from the remote come back as 502.
    """
    return await parse_url(client, url)
