"""Schemas for the Drive upload endpoint."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class DriveUploadResult(BaseModel):
    """Identifier and share link of an uploaded Drive file."""

    fileId: str = Field(..., description="Drive identifier of the created file.")
    webViewLink: Optional[str] = Field(
        None, description="Public link for viewing the file in Drive."
    )


__all__ = ["DriveUploadResult"]
