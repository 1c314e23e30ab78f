"""
Upload orchestration against the Google Drive API.

The upload is a linear saga of four dependent calls. Each step is logged;
there is no rollback unless orphan deletion is switched on, in which case a
failure after the file was created issues a best-effort delete.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from drive_proxy.clients.google_drive import GoogleDriveClient
from drive_proxy.core.errors import UpstreamError
from drive_proxy.models.oauth import TokenSet
from drive_proxy.schemas.drive import DriveUploadResult

logger = logging.getLogger(__name__)

# Drive metadata is always declared as PDF, while the content upload sends
# the file's own content type. Both are forwarded as received.
METADATA_MIME_TYPE = "application/pdf"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class DriveUploadService:
    """Create a Drive file, upload its bytes, share it and return its link."""

    def __init__(
        self,
        *,
        delete_orphans: bool = False,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._delete_orphans = delete_orphans
        self._timeout = timeout
        self._transport = transport

    async def upload(
        self,
        *,
        tokens: TokenSet,
        file_name: str,
        content: bytes,
        content_type: Optional[str],
    ) -> DriveUploadResult:
        async with GoogleDriveClient(
            tokens.access_token, timeout=self._timeout, transport=self._transport
        ) as drive:
            file_id = await drive.create_file(
                name=file_name, mime_type=METADATA_MIME_TYPE
            )
            logger.info("Drive upload step 1/4: created file %s (%s)", file_id, file_name)

            try:
                await drive.upload_content(
                    file_id,
                    content=content,
                    content_type=content_type or DEFAULT_CONTENT_TYPE,
                )
                logger.info(
                    "Drive upload step 2/4: uploaded %d bytes to %s",
                    len(content),
                    file_id,
                )

                await drive.grant_permission(file_id)
                logger.info("Drive upload step 3/4: shared %s with anyone", file_id)

                web_view_link = await drive.get_web_view_link(file_id)
                logger.info("Drive upload step 4/4: fetched share link for %s", file_id)
            except UpstreamError as exc:
                logger.error("Drive upload for %s aborted: %s", file_id, exc.message)
                if self._delete_orphans:
                    await self._compensate(drive, file_id)
                else:
                    logger.warning("Drive file %s left orphaned", file_id)
                raise

        return DriveUploadResult(fileId=file_id, webViewLink=web_view_link)

    async def _compensate(self, drive: GoogleDriveClient, file_id: str) -> None:
        try:
            await drive.delete_file(file_id)
        except UpstreamError as exc:
            logger.error("Failed to delete orphaned Drive file %s: %s", file_id, exc.message)
        else:
            logger.info("Deleted orphaned Drive file %s", file_id)


__all__ = ["DEFAULT_CONTENT_TYPE", "DriveUploadService", "METADATA_MIME_TYPE"]
