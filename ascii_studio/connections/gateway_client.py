import logging
import httpx

from ascii_studio import config
from ascii_studio.errors import BackendUnavailable, MalformedResponse
from ascii_studio.models import FontCatalog, GenerationResult

logger = logging.getLogger("gateway_client")


class GatewayClient:
    """
    Async client for the gateway's /api routes.

    Raises BackendUnavailable on transport errors and non-2xx statuses, and
    MalformedResponse when a 2xx body cannot be read as the expected shape.
    """

    def __init__(self, base_url=None, timeout=None, transport=None):
        self.base_url = config.GATEWAY_URL if base_url is None else base_url
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=config.REQUEST_TIMEOUT if timeout is None else timeout,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def list_fonts(self) -> FontCatalog:
        data = await self._send("GET", "/api/fonts")
        return FontCatalog.from_payload(data)

    async def generate(self, generation_request) -> GenerationResult:
        data = await self._send("POST", "/api/generate", json=generation_request.to_payload())
        return GenerationResult.from_payload(data)

    async def random(self) -> GenerationResult:
        data = await self._send("GET", "/api/random")
        return GenerationResult.from_payload(data)

    async def _send(self, method, path, json=None):
        try:
            if json is None:
                response = await self._client.request(method, path)
            else:
                response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise BackendUnavailable(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise BackendUnavailable(f"Gateway responded with status: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponse(f"{method} {path} returned a non-JSON body") from e
