"""Bearer token handling.

The agency's auth provider signs tokens with the shared SECRET_KEY; this
service only verifies them and reads two claims: sub (the user profile id)
and tenant_id (the agency). create_access_token signs tokens of the same
shape for local development and tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from agencyflow.core.config import get_settings

REQUIRED_CLAIMS = ("sub", "tenant_id")


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Sign claims (sub, tenant_id, ...) with an exp of now + expires_delta.

    expires_delta defaults to settings.access_token_expire_minutes; a negative
    value yields an already-expired token.
    """
    settings = get_settings()
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {**data, "exp": datetime.now(UTC) + lifetime}
    return str(
        jwt.encode(claims, settings.secret_key.get_secret_value(), algorithm=settings.algorithm)
    )


def verify_token(token: str) -> dict[str, Any]:
    """Return the claims of a valid, unexpired token.

    Raises:
        ValueError: Bad signature, expired, malformed, or a required claim
            (exp, sub, tenant_id) is missing or empty.
    """
    settings = get_settings()
    try:
        claims = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    missing = [name for name in REQUIRED_CLAIMS if not claims.get(name)]
    if missing:
        raise ValueError(f"Token missing required claim(s): {', '.join(missing)}")
    return claims
