"""Google Drive REST client wrapper."""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from drive_proxy.core.errors import UpstreamError
from drive_proxy.utils.http import parse_json, send_request


class GoogleDriveClient:
    """Thin wrapper over the Drive v3 endpoints used by the upload saga.

    One instance is bound to a single bearer token and an open
    ``httpx.AsyncClient``; use it as an async context manager.
    """

    FILES_URL = "https://www.googleapis.com/drive/v3/files"
    UPLOAD_URL = "https://www.googleapis.com/upload/drive/v3/files"

    def __init__(
        self,
        access_token: str,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"Authorization": f"Bearer {access_token}"},
        )

    async def __aenter__(self) -> "GoogleDriveClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self._client.__aexit__(*exc_info)

    async def create_file(self, *, name: str, mime_type: str) -> str:
        """Create a metadata-only file and return its identifier."""
        action = "Drive file creation"
        response = await send_request(
            self._client,
            "POST",
            self.FILES_URL,
            action=action,
            json={"name": name, "mimeType": mime_type},
        )
        metadata = parse_json(response, action=action)
        file_id = metadata.get("id") if isinstance(metadata, dict) else None
        if not file_id:
            raise UpstreamError(f"{action} returned no file identifier.")
        return file_id

    async def upload_content(
        self, file_id: str, *, content: bytes, content_type: str
    ) -> None:
        await send_request(
            self._client,
            "PATCH",
            f"{self.UPLOAD_URL}/{file_id}",
            action="Drive content upload",
            params={"uploadType": "media"},
            headers={"Content-Type": content_type},
            content=content,
        )

    async def grant_permission(
        self, file_id: str, *, role: str = "reader", grantee_type: str = "anyone"
    ) -> None:
        await send_request(
            self._client,
            "POST",
            f"{self.FILES_URL}/{file_id}/permissions",
            action="Drive permission update",
            json={"role": role, "type": grantee_type},
        )

    async def get_web_view_link(self, file_id: str) -> Optional[str]:
        action = "Drive share link lookup"
        response = await send_request(
            self._client,
            "GET",
            f"{self.FILES_URL}/{file_id}",
            action=action,
            params={"fields": "webViewLink"},
        )
        data: Dict[str, Any] = parse_json(response, action=action)
        return data.get("webViewLink") if isinstance(data, dict) else None

    async def delete_file(self, file_id: str) -> None:
        await send_request(
            self._client,
            "DELETE",
            f"{self.FILES_URL}/{file_id}",
            action="Drive file deletion",
        )


__all__ = ["GoogleDriveClient"]
