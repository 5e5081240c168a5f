from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.location import StorefrontFeedResponse, StorefrontLocation
from app.services.location import location_service
from app.core.shop_context import get_shop_domain

router = APIRouter()


@router.get("", response_model=StorefrontFeedResponse, response_model_by_alias=True)
def get_pickup_delivery_locations(
    db: Session = Depends(get_db),
    _shop_domain: str = Depends(get_shop_domain)
):
    """
    Read-only feed of the shop's active locations, as ``{"locations": [...]}``.
    
    Keys are camelCase for the storefront script.
    """
    locations = location_service.list_active(db=db, shop_domain=_shop_domain)
    feed = StorefrontFeedResponse(
        locations=[StorefrontLocation.model_validate(loc) for loc in locations]
    )
    # Serialized here; the response model only documents the shape
    return JSONResponse(feed.model_dump(mode="json", by_alias=True))
