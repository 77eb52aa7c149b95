import asyncio
import json
from typing import Any, Callable, Dict, Optional, Union
import httpx
from PIL import Image
from ..core.errors import EmptyResponseError, ParseError, TransportError
from ..core.logging import get_logger
from .image_services import DEFAULT_JPEG_QUALITY, encode_jpeg
from .request_builder import AnalysisRequest, build_request, require_credentials

logger = get_logger("analysis-client")

ImageInput = Union[bytes, Image.Image]

class AnalysisClient:
    """
    One-shot uploader shared by the emotion and tagging clients.

    Each call re-encodes the image, issues exactly one POST and decodes the
    JSON reply. Nothing is retried or cached, and the HTTP library's default
    timeout applies. Subclasses turn the decoded reply into typed results.
    """

    service_name = "analysis"

    def __init__(self, subscription_key: str, endpoint_url: str,
                 jpeg_quality: float = DEFAULT_JPEG_QUALITY,
                 verify_ssl: bool = True,
                 http_client: Optional[httpx.AsyncClient] = None):
        self.subscription_key = subscription_key
        self.endpoint_url = endpoint_url
        self.jpeg_quality = jpeg_quality
        self.verify_ssl = verify_ssl
        # When supplied, the caller owns the client and is responsible for closing it.
        self._http_client = http_client

    def request_params(self) -> Dict[str, str]:
        return {}

    def normalize(self, payload: Any):
        raise NotImplementedError

    async def analyze(self, image: ImageInput):
        """
        Analyse one image and return the normalized results.

        Raises ConfigurationError, ImageEncodingError, TransportError,
        EmptyResponseError or ParseError; never returns partial results.
        """
        payload = await self.fetch_reply(image)
        results = self.normalize(payload)
        logger.info(f"{self.service_name}: {len(results)} result(s) extracted from reply")
        return results

    def analyze_with_callback(self, image: ImageInput,
                              completion: Callable[[Optional[Any], Optional[BaseException]], None]) -> "asyncio.Task":
        """
        Start analyze() on the running event loop and report back through completion.

        completion(results, None) on success or completion(None, error) on failure
        is called exactly once, from the loop's thread.
        """
        async def run():
            try:
                results = await self.analyze(image)
            except Exception as e:
                completion(None, e)
                return
            completion(results, None)

        return asyncio.get_running_loop().create_task(run())

    async def fetch_reply(self, image: ImageInput) -> Any:
        require_credentials(self.subscription_key, self.endpoint_url)
        # Pillow decode and encode are CPU bound; keep them off the event loop.
        body = await asyncio.to_thread(encode_jpeg, image, self.jpeg_quality)
        request = build_request(body, self.subscription_key, self.endpoint_url, self.request_params())
        response = await self._send(request)
        return self._decode(response)

    async def _send(self, request: AnalysisRequest) -> httpx.Response:
        logger.info(f"{self.service_name}: sending {len(request.body)} byte image to {request.url}")
        try:
            if self._http_client is not None:
                return await self._dispatch(self._http_client, request)
            async with httpx.AsyncClient(verify=self.verify_ssl) as client:
                return await self._dispatch(client, request)
        except httpx.HTTPError as e:
            logger.error(f"{self.service_name}: request to {request.url} failed: {e}", exc_info=True)
            raise TransportError(f"Request to {request.url} failed: {e}", cause=e) from e

    @staticmethod
    async def _dispatch(client: httpx.AsyncClient, request: AnalysisRequest) -> httpx.Response:
        return await client.request(
            request.method,
            request.url,
            params=request.params or None,
            headers=request.headers,
            content=request.body,
        )

    def _decode(self, response: httpx.Response) -> Any:
        # Status codes are not treated as failures; an error object in the body
        # simply normalizes to no results.
        if response.is_error:
            logger.warning(f"{self.service_name}: service answered with HTTP {response.status_code}")

        if not response.content:
            logger.error(f"{self.service_name}: service answered without a body")
            raise EmptyResponseError(f"The {self.service_name} service returned an empty response.")

        try:
            return json.loads(response.content)
        except (ValueError, RecursionError) as e:
            logger.error(f"{self.service_name}: reply is not valid JSON: {e}")
            raise ParseError(f"Could not parse the {self.service_name} reply: {e}", cause=e) from e
