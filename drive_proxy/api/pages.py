"""HTML rendering for the OAuth callback page."""

from __future__ import annotations

from html import escape

from drive_proxy.services.oauth_callback import (
    HOME_PATH,
    CallbackState,
    OAuthCallbackView,
)

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Google Drive</title>
{refresh}
</head>
<body>
<main class="callback callback--{state}">
<h1>Google Drive</h1>
<p class="status">{status}</p>
{action}
</main>
</body>
</html>
"""


def render_callback_page(view: OAuthCallbackView) -> str:
    refresh = ""
    action = ""
    if view.state is CallbackState.SUCCESS:
        delay = int(round(view.redirect_delay))
        refresh = f'<meta http-equiv="refresh" content="{delay};url={HOME_PATH}">'
    elif view.state is CallbackState.ERROR:
        action = f'<a class="button" href="{HOME_PATH}">Return home</a>'
    return _PAGE_TEMPLATE.format(
        refresh=refresh,
        state=view.state.value,
        status=escape(view.status),
        action=action,
    )


__all__ = ["render_callback_page"]
