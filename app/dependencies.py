from fastapi import HTTPException, status, Request
from jose import JWTError
from app.core.security import verify_session_token, shop_domain_from_claims


async def get_session_claims(request: Request) -> dict:
    """
    Extract and validate the session token from the Authorization Bearer header.
    
    The embedded admin app attaches a fresh Shopify session token to every
    request, so no server-side session lookup is needed.
    
    Args:
        request: FastAPI Request to extract Authorization header
    
    Returns:
        Verified token claims
    
    Raises:
        HTTPException: If token is missing or invalid
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    
    authorization = request.headers.get("Authorization")
    if not authorization or not authorization.startswith("Bearer "):
        raise credentials_exception
    
    token = authorization.replace("Bearer ", "", 1)
    
    try:
        payload = verify_session_token(token)
    except JWTError:
        raise credentials_exception
    
    if not shop_domain_from_claims(payload):
        raise credentials_exception
    
    return payload


async def get_form_submission(request: Request) -> dict:
    """
    Raw form fields of a POST/PUT body as a plain ``{name: value}`` mapping.
    
    A repeated field keeps its first value.
    """
    form = await request.form()
    return {key: form.get(key) for key in form.keys()}
