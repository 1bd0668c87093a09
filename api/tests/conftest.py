"""Shared fixtures for blog feed tests."""

from collections.abc import Callable

import httpx
import pytest


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset all module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from api.config import get_settings

    get_settings.cache_clear()

    # 2. HTTP client singleton
    import api.services.http_client as http_mod

    http_mod._client = None

    # 3. Request ID context
    from api.middleware import request_id_var

    request_id_var.set("")


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with Blogger credentials configured."""
    from api.config import Settings, get_settings
    from api.main import app

    test_settings = Settings(
        environment="test",
        blogger_api_key="test-key",
        blogger_blog_id="12345",
        blogger_api_base="https://blogger.test/v3",
        blogger_timeout=2.0,
    )

    get_settings.cache_clear()

    # Patch get_settings in modules that call it directly.  api.config itself
    # is left alone so the route keeps Depends on the real get_settings.
    for mod_path in [
        "api.main",
        "api.services.http_client",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    # The route receives settings through Depends(get_settings)
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield test_settings
    app.dependency_overrides.pop(get_settings, None)


@pytest.fixture
def unconfigured_settings(mock_settings):
    """Same as mock_settings but without Blogger credentials."""
    mock_settings.blogger_api_key = ""
    mock_settings.blogger_blog_id = ""
    return mock_settings


@pytest.fixture
def blogger_client(mocker) -> Callable[..., list[httpx.Request]]:
    """Factory wiring a fake Blogger upstream into the blogs router.

    Pass a handler ``(httpx.Request) -> httpx.Response`` (it may raise to
    simulate transport errors).  Returns the list of requests the fake
    upstream received.
    """

    def _install(handler: Callable[[httpx.Request], httpx.Response]):
        seen: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_recording))
        mocker.patch("api.routers.blogs.get_shared_client", return_value=client)
        return seen

    return _install
