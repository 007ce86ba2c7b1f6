from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

import httpx
from pydantic import ValidationError as PydanticValidationError

from app import config
from app.errors import NetworkError, ValidationError
from app.schemas import ActivityCreate, ActivityRead

T = TypeVar("T")


class ActivityClient:
    """
    Talks to the Activity API for the dashboard. Failures surface as
    NetworkError for the user to retry; nothing is retried automatically.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=base_url or config.API_BASE_URL,
            timeout=timeout if timeout is not None else config.API_TIMEOUT,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as e:
            print(f"WARN: Request to {path} timed out: {e}")
            raise NetworkError("The server took too long to respond. Please try again.") from e
        except httpx.RequestError as e:
            print(f"WARN: Could not reach the API at {path}: {e}")
            raise NetworkError("Could not connect to the server. Check your connection.") from e
        except httpx.HTTPStatusError as e:
            body = _safe_json(e.response)
            if e.response.status_code == 400 and "errors" in body:
                raise ValidationError(body["errors"], body.get("message", "Validation Error")) from e
            message = body.get("message") or f"Server responded with {e.response.status_code}"
            print(f"ERROR: API returned status {e.response.status_code} for {path}: {message}")
            raise NetworkError(
                message,
                status_code=e.response.status_code,
                retryable=e.response.status_code >= 500,
            ) from e

    def _parse(self, response: httpx.Response, parse: Callable[[Any], T]) -> T:
        """Decodes a successful response; bodies the UI cannot read become NetworkError."""
        try:
            return parse(response.json())
        except (ValueError, TypeError, PydanticValidationError) as e:
            print(f"ERROR: Unexpected response from {response.request.url.path}: {e}")
            raise NetworkError(
                "Unexpected response from the server.",
                status_code=response.status_code,
            ) from e

    def list_activities(self) -> List[ActivityRead]:
        response = self._request("GET", "/activities")
        return self._parse(response, lambda data: [ActivityRead.model_validate(item) for item in data])

    def add_activity(self, activity: Union[ActivityCreate, Dict[str, Any]]) -> ActivityRead:
        if isinstance(activity, ActivityCreate):
            activity = activity.model_dump(mode="json", by_alias=True)
        response = self._request("POST", "/activities", json=activity)
        return self._parse(response, ActivityRead.model_validate)


def _safe_json(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
