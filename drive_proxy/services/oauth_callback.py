"""
State machine behind the OAuth redirect target.

The view starts in ``processing``. A missing ``code`` query parameter moves
it to ``error`` before anything is awaited; otherwise the code is exchanged
for tokens, the token set is persisted under a single storage key and a
cancellable timer navigates back to the application root.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional
from urllib.parse import parse_qs, urlparse

from drive_proxy.clients.token_store import TokenStore

logger = logging.getLogger(__name__)

TOKEN_STORAGE_KEY = "googleDriveTokens"
REDIRECT_DELAY_SECONDS = 2.0
HOME_PATH = "/"

TokenFetcher = Callable[[str], Awaitable[Dict[str, Any]]]
Navigator = Callable[[str], None]


class CallbackState(str, Enum):
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


def extract_authorization_code(url: str) -> Optional[str]:
    """Return the ``code`` query parameter of ``url``, if any."""
    values = parse_qs(urlparse(str(url)).query).get("code")
    if not values or not values[0]:
        return None
    return values[0]


class OAuthCallbackView:
    """Drive the callback page from ``processing`` to ``success`` or ``error``."""

    def __init__(
        self,
        *,
        fetch_tokens: TokenFetcher,
        store: TokenStore,
        navigate: Optional[Navigator] = None,
        redirect_delay: float = REDIRECT_DELAY_SECONDS,
    ) -> None:
        self._fetch_tokens = fetch_tokens
        self._store = store
        self._navigate = navigate
        self.redirect_delay = redirect_delay
        self.state = CallbackState.PROCESSING
        self.status = "Processing authentication..."
        self.tokens: Optional[Dict[str, Any]] = None
        self._task: Optional[asyncio.Task] = None
        self._redirect_timer: Optional[asyncio.TimerHandle] = None

    @property
    def redirect_pending(self) -> bool:
        return self._redirect_timer is not None and not self._redirect_timer.cancelled()

    def start(self, url: str) -> Optional[asyncio.Task]:
        """
        Begin processing the callback URL.

        Returns the token exchange task, or ``None`` when the URL carries no
        authorization code and the view already sits in ``error``.
        """
        code = extract_authorization_code(url)
        if not code:
            self._fail("No authorization code received")
            return None

        self._task = asyncio.get_running_loop().create_task(self._complete(code))
        return self._task

    async def _complete(self, code: str) -> None:
        try:
            tokens = await self._fetch_tokens(code)
            self._store.set_item(TOKEN_STORAGE_KEY, tokens)
        except Exception as exc:
            logger.exception("OAuth callback failed")
            self._fail(str(exc))
            return

        self.tokens = tokens
        self.state = CallbackState.SUCCESS
        self.status = "Authentication successful. Redirecting..."
        logger.info("OAuth callback succeeded; tokens stored under %s", TOKEN_STORAGE_KEY)

        if self._navigate is not None:
            loop = asyncio.get_running_loop()
            self._redirect_timer = loop.call_later(
                self.redirect_delay, self._redirect_home
            )

    def _fail(self, message: str) -> None:
        self.state = CallbackState.ERROR
        self.status = f"Error: {message}"

    def _redirect_home(self) -> None:
        self._redirect_timer = None
        if self._navigate is not None:
            self._navigate(HOME_PATH)

    def return_home(self) -> None:
        """Manual recovery action offered while in ``error``."""
        self.close()
        if self._navigate is not None:
            self._navigate(HOME_PATH)

    def close(self) -> None:
        """Cancel any pending exchange and the scheduled redirect."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        if self._redirect_timer is not None:
            self._redirect_timer.cancel()
            self._redirect_timer = None


__all__ = [
    "CallbackState",
    "HOME_PATH",
    "OAuthCallbackView",
    "REDIRECT_DELAY_SECONDS",
    "TOKEN_STORAGE_KEY",
    "extract_authorization_code",
]
