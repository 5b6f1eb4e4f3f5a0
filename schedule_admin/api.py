"""
API Client - httpx transport for the remote resource API
All remote failures surface as ApiError carrying a human-readable message.
"""
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import httpx

from .config import config

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApiError(Exception):
    """Raised for any failed remote call (HTTP status, transport or decoding)"""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 method: str = '', url: str = ''):
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url
        super().__init__(message)


def _status_error_message(response: httpx.Response) -> str:
    """Prefer the server's own message, fall back to the status code"""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return f"Request failed with status code {response.status_code}"


def require_object_list(body: Any, path: str) -> List[Dict]:
    """Collection endpoints must answer with a JSON list of objects (empty body counts as [])"""
    if body is None:
        return []
    if not isinstance(body, list) or not all(isinstance(item, dict) for item in body):
        logger.error(f"GET {path} returned {type(body).__name__} instead of a list of objects")
        raise ApiError(f"Unexpected response from {path}", None, 'GET', path)
    return body


def parse_object_list(body: Any, path: str, parse: Callable[[Dict], T]) -> List[T]:
    """Shape-check a collection body and build one item per object"""
    items = require_object_list(body, path)
    try:
        return [parse(item) for item in items]
    except (AttributeError, TypeError, ValueError) as e:
        logger.error(f"GET {path} returned malformed items: {e}")
        raise ApiError(f"Unexpected response from {path}", None, 'GET', path) from e


class ApiClient:
    """Thin JSON client over httpx.Client"""

    def __init__(self, base_url: str, timeout: Optional[float] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.base_url = base_url
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={'Accept': 'application/json'},
        )

    def request(self, method: str, path: str, json: Any = None) -> Any:
        """Send a request and return the decoded JSON body (None when empty)"""
        try:
            response = self._client.request(method, path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = _status_error_message(e.response)
            logger.error(f"{method} {path} failed: {e.response.status_code} {message}")
            raise ApiError(message, e.response.status_code, method, path) from e
        except httpx.HTTPError as e:
            message = str(e) or "Network Error"
            logger.error(f"{method} {path} failed: {message}")
            raise ApiError(message, None, method, path) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {path} returned invalid JSON")
            raise ApiError("Invalid JSON in server response", response.status_code, method, path) from e

    def get(self, path: str) -> Any:
        return self.request('GET', path)

    def post(self, path: str, data: Dict) -> Any:
        return self.request('POST', path, json=data)

    def put(self, path: str, data: Dict) -> Any:
        return self.request('PUT', path, json=data)

    def delete(self, path: str) -> Any:
        return self.request('DELETE', path)

    def close(self):
        self._client.close()


_api_client: Optional[ApiClient] = None


def get_api_client() -> ApiClient:
    """Get the shared API client built from configuration"""
    global _api_client
    if _api_client is None:
        api_config = config.get_api_config()
        _api_client = ApiClient(api_config['base_url'], api_config['timeout'])
        logger.info(f"API client ready for {api_config['base_url']}")
    return _api_client
