import logging
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import quote

import httpx

from .config import PAGE_LIMIT, Settings

logger = logging.getLogger(__name__)


class CrmApiError(Exception):
    """
    A failed CRM call. status_code and body are set when the CRM answered,
    both are None for transport failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def has_response(self) -> bool:
        return self.status_code is not None


def _response_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


class CrmClient:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.access_token}",
            "Content-Type": "application/json",
        }

    def _record_url(self, record_id: str) -> str:
        return f"{self.settings.collection_url}/{quote(record_id, safe='')}"

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        logger.debug(f"CRM {method} {url}")
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.request(method, url, headers=self.headers, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CrmApiError(
                f"CRM {method} failed with status {e.response.status_code}",
                status_code=e.response.status_code,
                body=_response_body(e.response),
            ) from e
        except httpx.HTTPError as e:
            raise CrmApiError(f"CRM {method} failed: {e}") from e
        return resp

    async def _request_json(self, method: str, url: str, **kwargs) -> dict:
        resp = await self._request(method, url, **kwargs)
        try:
            payload = resp.json()
        except ValueError as e:
            raise CrmApiError(
                f"CRM {method} returned a non-JSON body",
                status_code=resp.status_code,
                body=resp.text,
            ) from e
        if not isinstance(payload, dict):
            raise CrmApiError(
                f"CRM {method} returned an unexpected body",
                status_code=resp.status_code,
                body=payload,
            )
        return payload

    async def list_records(self, properties: Iterable[str], limit: int = PAGE_LIMIT) -> list[dict]:
        params = {
            "properties": ",".join(properties),
            "limit": min(limit, PAGE_LIMIT),
        }
        payload = await self._request_json("GET", self.settings.collection_url, params=params)
        results = payload.get("results")
        return results if isinstance(results, list) else []

    async def create_record(self, properties: Mapping[str, str]) -> dict:
        return await self._request_json("POST", self.settings.collection_url, json={"properties": dict(properties)})

    async def update_record(self, record_id: str, properties: Mapping[str, str]) -> dict:
        return await self._request_json("PATCH", self._record_url(record_id), json={"properties": dict(properties)})

    async def delete_record(self, record_id: str) -> None:
        await self._request("DELETE", self._record_url(record_id))
