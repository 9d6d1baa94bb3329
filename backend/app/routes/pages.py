"""
Rodrise School Management Backend — Page Shell Routes
======================================================

What:  GET / renders the dashboard shell; POST /theme switches the theme.
How:   Pages render through app.templating.templates, so session and theme
       context are present without each route passing them.
"""

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.exceptions import ValidationError
from app.templating import THEME_COOKIE, templates
from app.themes import THEMES

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"], include_in_schema=False)

APP_TITLE = "Rodrise School Management System"
APP_DESCRIPTION = (
    "Comprehensive school management system for fees, students, and administration"
)

# One year; the choice should survive browser restarts
THEME_COOKIE_MAX_AGE = 365 * 24 * 60 * 60


@router.get("/", response_class=HTMLResponse)
async def dashboard(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"title": APP_TITLE, "description": APP_DESCRIPTION},
    )


@router.post("/theme")
async def set_theme(theme: str = Form(...)) -> RedirectResponse:
    """
    Store the chosen theme in a cookie and go back to the dashboard.

    Raises:
        ValidationError: theme is not one of the palette keys (→ 400)
    """
    if theme not in THEMES:
        raise ValidationError(message=f"Unknown theme '{theme}'", field="theme")

    response = RedirectResponse(url="/", status_code=303)
    response.set_cookie(
        THEME_COOKIE,
        theme,
        max_age=THEME_COOKIE_MAX_AGE,
        samesite="lax",
    )
    logger.debug("Theme set to %s", theme)
    return response
