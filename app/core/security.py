from typing import Optional
from urllib.parse import urlparse
from jose import JWTError, jwt
from app.core.config import settings


def _host(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    return urlparse(url).netloc or None


def verify_session_token(token: str) -> dict:
    """
    Verify and decode a Shopify session token.
    
    Session tokens are short-lived JWTs signed with the app's API secret.
    Signature, expiry, not-before and audience are checked by python-jose;
    the issuer must point at the same shop as the destination.
    
    Args:
        token: JWT token string from the Authorization header
    
    Returns:
        Dictionary containing token claims
    
    Raises:
        JWTError: If token is invalid, expired, or issued for another app/shop
    """
    payload = jwt.decode(
        token,
        settings.SHOPIFY_API_SECRET,
        algorithms=[settings.SESSION_TOKEN_ALGORITHM],
        audience=settings.SHOPIFY_API_KEY,
        options={
            "leeway": settings.SESSION_TOKEN_LEEWAY_SECONDS,
            "require_aud": True,
            "require_exp": True,
        },
    )

    dest_host = _host(payload.get("dest"))
    if dest_host is None:
        raise JWTError("Session token has no destination shop")
    if _host(payload.get("iss")) != dest_host:
        raise JWTError("Session token issuer does not match destination shop")

    return payload


def shop_domain_from_claims(payload: dict) -> str:
    """Shop domain (e.g. ``example.myshopify.com``) from verified token claims."""
    return _host(payload.get("dest"))
