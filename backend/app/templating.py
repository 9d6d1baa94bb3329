"""
Rodrise School Management Backend — Page Shell Templating
==========================================================

What:  The Jinja2 environment for server-rendered pages and the two context
       providers wrapped around every render.
How:   Starlette's Jinja2Templates runs each context processor on every
       TemplateResponse and merges the returned dicts into the template
       context, in list order:

           session_context  →  theme_context  →  template

    Session first, theme second: the theme layer may depend on who is
    signed in, never the other way round.

Template variables:
    session           signed-in user dict from the session cookie, or None
    is_authenticated  bool
    theme             active theme key ("cyan", ..., "dark")
    theme_config      palette entry for the active theme
    is_dark           True for the dark theme
    themes            full palette (for the theme switcher)
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi.templating import Jinja2Templates
from starlette.requests import Request

from app.config import settings
from app.themes import DARK_THEME, THEMES

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

THEME_COOKIE = "theme"
SESSION_USER_KEY = "user"


def resolve_theme(value: Optional[str]) -> str:
    """Known theme keys pass through; anything else falls back to the default."""
    if value in THEMES:
        return value
    return settings.default_theme


def session_context(request: Request) -> Dict[str, Any]:
    """
    Expose the authentication session to templates.

    `request.session` only exists when SessionMiddleware is installed; pages
    rendered without it behave as signed out.
    """
    user = None
    if "session" in request.scope:
        user = request.session.get(SESSION_USER_KEY)
    return {"session": user, "is_authenticated": user is not None}


def theme_context(request: Request) -> Dict[str, Any]:
    """Expose the active theme (from the theme cookie) to templates."""
    theme = resolve_theme(request.cookies.get(THEME_COOKIE))
    return {
        "theme": theme,
        "theme_config": THEMES[theme],
        "is_dark": theme == DARK_THEME,
        "themes": THEMES,
    }


templates = Jinja2Templates(
    directory=str(TEMPLATES_DIR),
    context_processors=[session_context, theme_context],
)
