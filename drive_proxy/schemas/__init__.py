"""Public schema exports."""

from .auth import AuthUrlResponse, TokenExchangeRequest, TokenExchangeResponse
from .drive import DriveUploadResult

__all__ = [
    "AuthUrlResponse",
    "DriveUploadResult",
    "TokenExchangeRequest",
    "TokenExchangeResponse",
]
