"""
Rodrise School Management Backend — Page Shell Tests
=====================================================

What we test:
    ✅ Dashboard renders with the default theme and no session
    ✅ Theme cookie selects the palette; unknown values fall back
    ✅ POST /theme sets the cookie and redirects; unknown themes are 400
    ✅ Session context reads the signed-in user from the session
"""

import pytest
from starlette.requests import Request

from app.templating import resolve_theme, session_context, theme_context
from app.themes import THEMES


def _request(cookie: str = "", session=None) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(b"cookie", cookie.encode())] if cookie else [],
    }
    if session is not None:
        scope["session"] = session
    return Request(scope)


class TestDashboard:

    @pytest.mark.asyncio
    async def test_default_render(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Rodrise School Management System" in response.text
        assert 'data-theme="cyan"' in response.text
        assert "Not signed in" in response.text

    @pytest.mark.asyncio
    async def test_dark_theme_cookie(self, test_client):
        response = await test_client.get("/", headers={"Cookie": "theme=dark"})

        assert 'data-theme="dark"' in response.text
        assert 'class="dark"' in response.text

    @pytest.mark.asyncio
    async def test_unknown_theme_cookie_falls_back(self, test_client):
        response = await test_client.get("/", headers={"Cookie": "theme=neon"})

        assert 'data-theme="cyan"' in response.text


class TestThemeSwitch:

    @pytest.mark.asyncio
    async def test_sets_cookie_and_redirects(self, test_client):
        response = await test_client.post("/theme", data={"theme": "purple"})

        assert response.status_code == 303
        assert response.headers["location"] == "/"
        assert "theme=purple" in response.headers["set-cookie"]

    @pytest.mark.asyncio
    async def test_unknown_theme(self, test_client):
        response = await test_client.post("/theme", data={"theme": "neon"})

        assert response.status_code == 400
        assert response.json() == {"error": "Unknown theme 'neon'"}


class TestContextProviders:

    def test_resolve_theme(self):
        assert resolve_theme("rose") == "rose"
        assert resolve_theme(None) == "cyan"
        assert resolve_theme("neon") == "cyan"

    def test_session_without_middleware(self):
        assert session_context(_request()) == {"session": None, "is_authenticated": False}

    def test_session_with_user(self):
        user = {"first_name": "Admin", "last_name": "User", "role": "ADMIN"}

        context = session_context(_request(session={"user": user}))

        assert context == {"session": user, "is_authenticated": True}

    def test_theme_from_cookie(self):
        context = theme_context(_request(cookie="theme=green"))

        assert context["theme"] == "green"
        assert context["theme_config"] == THEMES["green"]
        assert context["is_dark"] is False
        assert set(context["themes"]) == set(THEMES)
