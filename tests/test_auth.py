import time

import jwt
import pytest
from flask import Flask
from werkzeug.exceptions import Unauthorized

from revenue_dashboard.auth import AuthService, JWTClaims
from revenue_dashboard.config import Settings


def make_token(secret, **overrides):
    payload = {"sub": "u-1", "name": "Ada", "email": " Ada@Example.com ", "exp": int(time.time()) + 60}
    payload.update(overrides)
    return jwt.encode(payload, secret, algorithm="HS256")


def test_default_claims_used_outside_request():
    svc = AuthService(settings=Settings(disable_auth=True, jwt_secret="s"))
    claims = svc.current_claims()
    assert claims["sub"]
    assert "exp" in claims


def test_decode_valid_token_normalizes_email():
    s = Settings(jwt_secret="secret")
    svc = AuthService(settings=s)
    model = JWTClaims.model_validate(svc._decode_jwt(make_token(s.jwt_secret)))
    assert model.email == "ada@example.com"
    assert model.display_name == "Ada"


def test_decode_invalid_token_raises():
    svc = AuthService(settings=Settings(jwt_secret="secret"))
    with pytest.raises(jwt.PyJWTError):
        svc._decode_jwt("not-a-token")


def test_claims_from_header_rejects_expired_and_missing():
    s = Settings(jwt_secret="secret")
    svc = AuthService(settings=s)
    with pytest.raises(Unauthorized):
        svc.claims_from_header("")
    with pytest.raises(Unauthorized):
        svc.claims_from_header("Bearer " + make_token(s.jwt_secret, exp=int(time.time()) - 10))


def test_guard_protects_pages_but_not_health():
    s = Settings(jwt_secret="secret", disable_auth=False)
    server = Flask(__name__)

    @server.route("/health")
    def health():
        return {"status": "ok"}

    @server.route("/")
    def index():
        return "ok"

    AuthService(settings=s).init_app(server)
    client = server.test_client()

    assert client.get("/health").status_code == 200
    assert client.get("/").status_code == 401
    ok = client.get("/", headers={"Authorization": "Bearer " + make_token(s.jwt_secret)})
    assert ok.status_code == 200
