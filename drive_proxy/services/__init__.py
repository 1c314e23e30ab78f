"""Service layer exports."""

from .drive_upload import DriveUploadService
from .oauth_callback import CallbackState, OAuthCallbackView

__all__ = [
    "CallbackState",
    "DriveUploadService",
    "OAuthCallbackView",
]
