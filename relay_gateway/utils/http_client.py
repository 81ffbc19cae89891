import httpx
from fastapi import Request
from relay_gateway.config import settings

USER_AGENT = "relay-gateway/1.0"


def create_http_client() -> httpx.AsyncClient:
    # Redirects are followed the way a stock HTTP client does; no retries
    return httpx.AsyncClient(
        timeout=settings.FETCH_TIMEOUT,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
    )


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
