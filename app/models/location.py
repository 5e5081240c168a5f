from sqlalchemy import Column, Integer, String, Boolean, Index, true, false
from app.database import Base, TimestampMixin


class Location(Base, TimestampMixin):
    """
    A shop-owned pickup/delivery point.

    Optional address parts are stored as NULL when blank, never as "".
    """
    __tablename__ = "location"
    __table_args__ = (
        Index("ix_location_shop_created", "shop_domain", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    shop_domain = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    apartment = Column(String, nullable=True)
    city = Column(String, nullable=True)
    zipcode = Column(String, nullable=True)
    province = Column(String, nullable=True)
    country = Column(String, nullable=True)

    # Storefront display options
    show_address = Column(Boolean, default=True, server_default=true(), nullable=False)
    show_city = Column(Boolean, default=True, server_default=true(), nullable=False)
    show_province = Column(Boolean, default=True, server_default=true(), nullable=False)
    show_postal_code = Column(Boolean, default=True, server_default=true(), nullable=False)
    show_country = Column(Boolean, default=True, server_default=true(), nullable=False)

    # Offerings
    offers_pickup = Column(Boolean, default=False, server_default=false(), nullable=False)
    offers_delivery = Column(Boolean, default=False, server_default=false(), nullable=False)

    # Toggled outside of the admin form
    active = Column(Boolean, default=True, server_default=true(), nullable=False)

    @property
    def storefront_address(self) -> str:
        """Address line built from only the parts the merchant chose to show."""
        parts = []
        if self.show_address:
            parts.append(self.address)
            if self.apartment:
                parts.append(self.apartment)
        if self.show_city and self.city:
            parts.append(self.city)
        if self.show_province and self.province:
            parts.append(self.province)
        if self.show_postal_code and self.zipcode:
            parts.append(self.zipcode)
        if self.show_country and self.country:
            parts.append(self.country)
        return ", ".join(parts)
