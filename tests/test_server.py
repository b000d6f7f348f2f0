from revenue_dashboard.server import ServerFactory
from revenue_dashboard import config


def test_health_endpoint(flask_client):
    rv = flask_client.get("/health")
    assert rv.status_code == 200
    js = rv.get_json()
    assert js["status"] == "ok"
    assert "time" in js


def test_index_served_with_auth_disabled(flask_client):
    assert flask_client.get("/").status_code == 200


def test_server_factory_title_and_cache():
    settings = config.get_settings()
    factory = ServerFactory(settings)
    server = factory.create_server()
    cache = factory.create_cache(server)
    app = factory.create_app(server)
    assert app.title == settings.app_title
    assert cache.config.get("CACHE_TYPE") == settings.cache_type
    assert "CACHE_REDIS_URL" not in cache.config
