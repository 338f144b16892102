from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from app.application.dto.auth import SessionTokenPayload
from app.application.ports.token_port import TokenPort


TOKEN_TYPE = "session"


class JwtTokenService(TokenPort):
    def __init__(self, *, jwt_secret: str, session_ttl_minutes: int):
        self._jwt_secret = jwt_secret
        self._session_ttl_minutes = session_ttl_minutes

    def create_session_token(self, *, principal: str, now: datetime) -> SessionTokenPayload:
        return SessionTokenPayload(
            principal=principal,
            token_id=uuid4().hex,
            issued_at=now,
            expires_at=now + timedelta(minutes=self._session_ttl_minutes),
        )

    def encode_session_token(self, *, payload: SessionTokenPayload) -> str:
        claims = {
            "sub": payload.principal,
            "jti": payload.token_id,
            "type": TOKEN_TYPE,
            "iat": int(payload.issued_at.timestamp()),
            "exp": int(payload.expires_at.timestamp()),
        }
        return jwt.encode(claims, self._jwt_secret, algorithm="HS256")

    def decode_session_token(self, *, token: str) -> SessionTokenPayload:
        # Expiry is checked by the token store against its own clock.
        try:
            claims = jwt.decode(
                token,
                self._jwt_secret,
                algorithms=["HS256"],
                options={"verify_exp": False, "require": ["sub", "jti", "iat", "exp"]},
            )
        except jwt.PyJWTError as exc:
            raise ValueError("Invalid session token.") from exc

        if claims.get("type") != TOKEN_TYPE:
            raise ValueError("Invalid token type.")

        principal = claims.get("sub")
        if not principal or not isinstance(principal, str):
            raise ValueError("Invalid token subject.")

        return SessionTokenPayload(
            principal=principal,
            token_id=str(claims["jti"]),
            issued_at=datetime.fromtimestamp(int(claims["iat"]), tz=timezone.utc),
            expires_at=datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc),
        )
