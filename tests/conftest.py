import os

import pytest

# Ensure predictable dev-like environment before importing the app
os.environ.setdefault("PORT", "8060")  # test port
os.environ.setdefault("DEBUG", "0")
os.environ.setdefault("DISABLE_AUTH", "1")
os.environ.setdefault("DATA_SOURCE", "SYNTHETIC")
os.environ.setdefault("CACHE_TYPE", "SimpleCache")
os.environ.setdefault("CACHE_TIMEOUT_SECONDS", "5")
os.environ.setdefault("MAX_ROWS", "40")
os.environ.setdefault("ITEMS_PER_PAGE", "6")


@pytest.fixture(scope="session")
def dash_app_and_server():
    """Import the app after env is set; expose Dash app and Flask server."""
    # Import delayed so config reads env just set above
    from revenue_dashboard import app as dash_app, server as flask_server  # noqa: WPS433 (import inside function)
    return dash_app, flask_server


@pytest.fixture(scope="session")
def flask_client(dash_app_and_server):
    """Flask test client with auth disabled by default."""
    _, server = dash_app_and_server
    return server.test_client()


@pytest.fixture
def revenue_points():
    return [
        {"month": "Jan", "revenue": 2000},
        {"month": "Feb", "revenue": 3000},
        {"month": "Mar", "revenue": 1500},
    ]
