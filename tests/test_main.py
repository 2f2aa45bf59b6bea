from fastapi.testclient import TestClient

import portfolio.main as main_module
from portfolio.main import app
from portfolio.settings import settings


def test_root_serves_landing_page_and_runs_lifespan(caplog):
    with caplog.at_level("INFO"):
        with TestClient(app) as client:
            res = client.get("/")
            assert res.status_code == 200
            assert settings.SITE_TITLE in res.text

    assert any(
        settings.bind_address in rec.message
        for rec in caplog.records
        if "Serving posts from" in rec.message
    )


def test_static_assets_get_cache_control_header():
    client = TestClient(app)

    res = client.get("/static/css/style.css")

    assert res.status_code == 200
    assert res.headers["cache-control"] == settings.STATIC_CACHE_CONTROL


def test_static_missing_asset_is_404():
    client = TestClient(app)

    res = client.get("/static/css/nope.css")

    assert res.status_code == 404


def test_blog_routes_are_mounted():
    client = TestClient(app)

    assert client.get("/blog").status_code == 200
    assert client.get("/").status_code == 200
    assert client.get("/blog/no-such-post").status_code == 404


def test_run_starts_uvicorn_with_configured_bind(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs))
    )

    main_module.run()

    assert calls == [
        (
            ("portfolio.main:app",),
            {
                "host": settings.HOST,
                "port": settings.PORT,
                "log_level": settings.LOG_LEVEL.lower(),
            },
        )
    ]
