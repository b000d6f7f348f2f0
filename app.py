# Thin entrypoint exposing Dash `app` and Flask `server`
from revenue_dashboard import app, server  # noqa: F401
from revenue_dashboard import config


if __name__ == "__main__":  # pragma: no cover
    # Production: gunicorn -c gunicorn.conf.py app:server
    app.run(host="0.0.0.0", port=config.PORT, debug=config.DEBUG)
