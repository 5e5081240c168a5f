from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.crud.base import CRUDBase
from app.models.location import Location
from app.schemas.location import LocationFields


class CRUDLocation(CRUDBase[Location, LocationFields]):
    """
    CRUD operations for Location model.
    
    Inherits all standard shop-scoped operations from CRUDBase.
    """
    
    def get_active(self, db: Session, *, shop_domain: str) -> List[Location]:
        """
        Active locations of a shop, alphabetically, for the storefront feed.
        """
        stmt = select(Location).where(
            Location.shop_domain == shop_domain,
            Location.active.is_(True)
        ).order_by(Location.name.asc(), Location.id.asc())
        result = db.execute(stmt)
        return list(result.scalars().all())


# Create a singleton instance
location = CRUDLocation(Location)
