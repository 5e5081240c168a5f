from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime


class LocationFields(BaseModel):
    """Normalized editable fields of a location, produced from a form submission."""
    name: str
    address: str
    apartment: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    show_address: bool = False
    show_city: bool = False
    show_province: bool = False
    show_postal_code: bool = False
    show_country: bool = False
    offers_pickup: bool = False
    offers_delivery: bool = False


class LocationResponse(LocationFields):
    id: int
    shop_domain: str
    active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StorefrontLocation(BaseModel):
    """Public projection of a location, serialized in camelCase for the theme."""
    id: int
    name: str
    address: str
    apartment: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    show_address: bool
    show_city: bool
    show_province: bool
    show_postal_code: bool
    show_country: bool
    offers_pickup: bool
    offers_delivery: bool
    storefront_address: str

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class StorefrontFeedResponse(BaseModel):
    locations: List[StorefrontLocation]
