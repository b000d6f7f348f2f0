import logging
import time
from typing import Dict, Any, Optional

import jwt
from flask import request, abort, g, Flask
from pydantic import BaseModel, ValidationError, field_validator

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

# Paths served without a bearer token
PUBLIC_PREFIXES = ("/assets", "/health")


class JWTClaims(BaseModel):
    """Claims the dashboard reads from a bearer token."""

    sub: str
    name: Optional[str] = None
    email: Optional[str] = None
    exp: int

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if v is None:
            return None
        s = str(v).strip().lower()
        return s or None

    @property
    def display_name(self) -> str:
        return self.name or self.email or self.sub


class AuthService:
    """JWT bearer-token guard for the Flask server."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def _decode_jwt(self, token: str) -> dict:
        """Decode and validate an HS256 JWT."""
        options = {"require": ["exp"], "verify_exp": True}
        kwargs: Dict[str, Any] = {"algorithms": ["HS256"]}
        if self.settings.jwt_issuer:
            kwargs["issuer"] = self.settings.jwt_issuer
        if self.settings.jwt_audience:
            kwargs["audience"] = self.settings.jwt_audience
        return jwt.decode(token, self.settings.jwt_secret, options=options, **kwargs)

    def default_claims(self) -> dict:
        model = JWTClaims(
            sub="user@example.com",
            name="Dev User",
            email="user@example.com",
            exp=int(time.time()) + 3600,
        )
        return model.model_dump()

    def current_claims(self) -> dict:
        """Claims for this request (dev defaults outside a request or with auth off)."""
        try:
            return getattr(g, "claims", self.default_claims())
        except RuntimeError:
            # no application context
            return self.default_claims()

    def claims_from_header(self, header: str) -> dict:
        if not header.startswith("Bearer "):
            abort(401, description="Missing or invalid Authorization header")

        token = header.split(" ", 1)[1].strip()
        try:
            decoded = self._decode_jwt(token)
            return JWTClaims.model_validate(decoded).model_dump()
        except (jwt.PyJWTError, ValidationError) as e:
            logger.warning("Rejected bearer token: %s", e)
            abort(401, description=f"Invalid token: {e}")

    def init_app(self, server: Flask) -> None:
        """Register a before_request auth guard on the Flask server."""

        @server.before_request
        def require_auth():
            path = request.path or ""
            if path.startswith(PUBLIC_PREFIXES):
                return None

            if self.settings.disable_auth:
                g.claims = self.default_claims()
                return None

            g.claims = self.claims_from_header(request.headers.get("Authorization", ""))
            return None


_auth_service = AuthService()


def current_claims():
    return _auth_service.current_claims()


def init_auth(server: Flask) -> None:
    _auth_service.init_app(server)
