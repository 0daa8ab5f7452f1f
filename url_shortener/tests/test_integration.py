"""Integration tests for URL shortener."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config, load_config
from shortlink.shortcode import ShortCodeGenerator
from shortlink.store import MappingStore
from shortlink.common.logging_config import setup_logging
from web_app import create_app


def _build_app(**config_overrides):
    logger = setup_logging(level="DEBUG")
    store = MappingStore(logger=logger)
    generator = ShortCodeGenerator()
    config = Config(**config_overrides)
    app = create_app(store=store, generator=generator, config=config, logger=logger)
    return app, store


@pytest.mark.asyncio
class TestIntegration:
    """End-to-end integration tests."""

    async def test_full_url_lifecycle(self):
        """Create, resolve, miss, then shut down."""
        app, store = _build_app()

        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://localhost:8080") as client:
                # 1. Create short URL
                create_response = await client.post("/shorten", json={"url": "https://example.com"})
                assert create_response.status_code == 200
                short_url = create_response.json()["short_url"]
                assert short_url.startswith("http://localhost:8080/")

                # 2. Follow it
                redirect_response = await client.get(short_url, follow_redirects=False)
                assert redirect_response.status_code == 302
                assert redirect_response.headers["location"] == "https://example.com"

                # 3. Health reflects the stored entry
                health = await client.get("/api/health")
                assert health.json()["urls"] == 1

                # 4. Unknown code
                missing = await client.get("/doesnotexist", follow_redirects=False)
                assert missing.status_code == 404

        # After shutdown every request context derives from a cancelled root
        assert app.state.root_context.done()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://localhost:8080") as client:
            response = await client.post("/shorten", json={"url": "https://example.com/late"})
            assert response.status_code == 500
        assert len(store) == 1

    async def test_request_timeout_is_applied(self):
        """Store calls see the configured request deadline."""
        app, store = _build_app(request_timeout_seconds=0.000001)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://localhost:8080") as client:
            response = await client.post("/shorten", json={"url": "https://example.com"})

        assert response.status_code == 500
        assert len(store) == 0

    async def test_stray_environment_does_not_change_codes(self, tmp_path, monkeypatch):
        """Unprefixed variables and a .env file leave the port and code shape alone."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("PORT=5000\nSHORT_CODE_LENGTH=3\nURL_SHORTENER_PORT=5001\n")
        monkeypatch.setenv("PORT", "5000")
        monkeypatch.setenv("SHORT_CODE_LENGTH", "3")
        monkeypatch.delenv("URL_SHORTENER_PORT", raising=False)

        config = load_config()
        assert config.port == 8080
        assert not hasattr(config, "short_code_length")

        app = create_app(store=MappingStore(), generator=ShortCodeGenerator(), config=config)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://localhost:8080") as client:
            responses = [
                await client.post("/shorten", json={"url": f"https://example.com/{i}"})
                for i in range(20)
            ]

        for response in responses:
            assert response.status_code == 200
            assert len(response.json()["short_url"].rsplit("/", 1)[1]) == 6


class TestConfig:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        """The service runs on port 8080 by default."""
        for name in ("HOST", "PORT", "BASE_URL", "REQUEST_TIMEOUT_SECONDS", "LOG_LEVEL"):
            monkeypatch.delenv(f"URL_SHORTENER_{name}", raising=False)

        config = Config()
        assert config.port == 8080
        assert config.host == "0.0.0.0"
        assert config.base_url == "http://localhost:8080"
        assert config.request_timeout_seconds > 0

    def test_environment_override(self, monkeypatch):
        """Prefixed environment variables override defaults."""
        monkeypatch.setenv("URL_SHORTENER_PORT", "9999")
        monkeypatch.setenv("URL_SHORTENER_LOG_LEVEL", "DEBUG")

        config = load_config()
        assert config.port == 9999
        assert config.log_level == "DEBUG"

    def test_unprefixed_variables_ignored(self, monkeypatch):
        """Generic names such as PORT belong to other programs."""
        monkeypatch.delenv("URL_SHORTENER_PORT", raising=False)
        monkeypatch.setenv("PORT", "5000")
        monkeypatch.setenv("HOST", "10.0.0.1")

        config = load_config()
        assert config.port == 8080
        assert config.host == "0.0.0.0"

    def test_dotenv_file_ignored(self, tmp_path, monkeypatch):
        """A .env file in the working directory is not read."""
        monkeypatch.delenv("URL_SHORTENER_PORT", raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("URL_SHORTENER_PORT=5001\n")

        assert load_config().port == 8080
