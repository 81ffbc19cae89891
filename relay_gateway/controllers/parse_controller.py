import logging
import httpx

from relay_gateway.utils.errors import ClientInputError, OperationError, RemoteGatewayError

logger = logging.getLogger(__name__)

def validate_url(url: str) -> httpx.URL:
    """
    Accept only absolute URLs. Relative references and anything httpx cannot
    parse are rejected before a request is made.
    """
    if not url:
        raise ClientInputError("URL parameter is required", {"url": ""})
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError, ValueError):
        raise ClientInputError("Invalid URL format", {"url": url})
    if not parsed.scheme:
        raise ClientInputError("Invalid URL format", {"url": url})
    return parsed

async def parse_url(client: httpx.AsyncClient, url: str):
    validate_url(url)

    try:
        response = await client.send(client.build_request("GET", url), stream=True)
    except httpx.HTTPError as e:
        logger.warning(f"⚠️ Fetch of {url} failed: {e!r}")
        raise OperationError(f"Failed to fetch URL: {e}", {"url": url})

    try:
        if response.status_code != 200:
            status_line = f"{response.status_code} {response.reason_phrase}".strip()
            logger.info(f"Fetch of {url} returned {status_line}")
            raise RemoteGatewayError(f"Received non-200 response: {status_line}", {"url": url})
        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            logger.warning(f"⚠️ Reading body of {url} failed: {e!r}")
            raise OperationError(f"Failed to read response body: {e}", {"url": url})
    finally:
        await response.aclose()

    logger.info(f"✅ Fetched {url} ({len(body)} bytes)")
    return {"url": url, "content": response.text}
