from fastapi import Depends
from app.dependencies import get_session_claims
from app.core.security import shop_domain_from_claims


def get_shop_domain(claims: dict = Depends(get_session_claims)) -> str:
    """
    FastAPI dependency that extracts the shop domain from the verified session.
    
    This dependency should be added to all routes that need shop isolation.
    The shop domain is then passed explicitly through service and CRUD layers.
    
    Args:
        claims: Verified session token claims
        
    Returns:
        Shop domain of the authenticated merchant
    """
    return shop_domain_from_claims(claims)
