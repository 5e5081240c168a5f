from typing import Any, List, Mapping, Optional
from sqlalchemy.orm import Session
from app.core.exceptions import LocationNotFoundError, LocationValidationError
from app.core.logging_config import logger
from app.crud import location as location_crud
from app.models.location import Location
from app.schemas.location import LocationFields


# Value the admin form sends for a checked checkbox
CHECKBOX_CHECKED = "on"

# Largest value the Integer primary key column can hold
MAX_LOCATION_ID = 2**31 - 1

REQUIRED_TEXT_FIELDS = ("name", "address")
OPTIONAL_TEXT_FIELDS = ("apartment", "city", "zipcode", "province", "country")

# Form field name -> model attribute
FLAG_FIELDS = {
    "showAddress": "show_address",
    "showCity": "show_city",
    "showProvince": "show_province",
    "showPostalCode": "show_postal_code",
    "showCountry": "show_country",
    "offersPickup": "offers_pickup",
    "offersDelivery": "offers_delivery",
}


def _read_text(submission: Mapping[str, Any], field: str) -> Optional[str]:
    raw = submission.get(field)
    if raw is None:
        return None
    value = str(raw).strip()
    return value or None


def parse_location_id(raw_id: Any) -> int:
    """
    Turn a path/form id into a positive integer.

    Raises:
        LocationValidationError: If the id is missing, non-numeric, not positive
            or too large for the id column
    """
    if raw_id is None or isinstance(raw_id, bool):
        raise LocationValidationError("invalid id")
    if isinstance(raw_id, int):
        location_id = raw_id
    else:
        text = str(raw_id).strip()
        if not (text.isascii() and text.isdigit()):
            raise LocationValidationError("invalid id")
        location_id = int(text)
    if location_id <= 0 or location_id > MAX_LOCATION_ID:
        raise LocationValidationError("invalid id")
    return location_id


class LocationService:
    """
    Service layer for location business logic.

    Owns form interpretation (trimming, blank-to-None, checkbox flags) and
    the shop ownership check in front of every read and write. Storage is
    delegated to the injected CRUD object; the session is passed per call.
    """

    def __init__(self, crud=location_crud):
        self.crud = crud

    def validate_and_normalize(self, submission: Mapping[str, Any]) -> LocationFields:
        """
        Validate a raw form submission and normalize its values.

        Text is trimmed; blank optional fields become None. Each flag is
        True only when its field was submitted as the checkbox sentinel, so
        an omitted flag is False rather than "unchanged".

        Args:
            submission: Mapping of form field name to raw value

        Returns:
            Normalized LocationFields

        Raises:
            LocationValidationError: If name or address is blank
        """
        name, address = (_read_text(submission, field) for field in REQUIRED_TEXT_FIELDS)
        if not name or not address:
            raise LocationValidationError("name and address are required")

        optional = {field: _read_text(submission, field) for field in OPTIONAL_TEXT_FIELDS}
        flags = {
            attr: submission.get(field) == CHECKBOX_CHECKED
            for field, attr in FLAG_FIELDS.items()
        }
        return LocationFields(name=name, address=address, **optional, **flags)

    def get_owned(self, db: Session, shop_domain: str, location_id: Any) -> Location:
        """
        Get a location by ID, only if it belongs to the shop.

        Raises:
            LocationValidationError: If the id is invalid
            LocationNotFoundError: If no location with this id belongs to the shop
        """
        location_id = parse_location_id(location_id)
        location = self.crud.get(db=db, id=location_id, shop_domain=shop_domain)
        if not location:
            raise LocationNotFoundError()
        return location

    def list(self, db: Session, shop_domain: str) -> List[Location]:
        """All locations of the shop, most recently created first."""
        return self.crud.get_multi(db=db, shop_domain=shop_domain)

    def list_active(self, db: Session, shop_domain: str) -> List[Location]:
        """Active locations of the shop for the storefront feed."""
        return self.crud.get_active(db=db, shop_domain=shop_domain)

    def create(self, db: Session, shop_domain: str, submission: Mapping[str, Any]) -> Location:
        """
        Create a location from a form submission.

        When the submission carries none of the flag fields, the column
        defaults apply (display flags on, offerings off). A form posted
        with every checkbox unticked therefore also gets the display flags
        on; this is deliberate, new locations start out fully visible.

        Raises:
            LocationValidationError: If name or address is blank
        """
        fields = self.validate_and_normalize(submission)

        data = fields.model_dump()
        if not any(field in submission for field in FLAG_FIELDS):
            for attr in FLAG_FIELDS.values():
                data.pop(attr)

        return self.crud.create(db=db, obj_in=data, shop_domain=shop_domain)

    def update(
        self,
        db: Session,
        shop_domain: str,
        location_id: Any,
        submission: Mapping[str, Any]
    ) -> Location:
        """
        Replace every editable field of a location.

        Raises:
            LocationValidationError: If the id is invalid or name/address is blank
            LocationNotFoundError: If the location isn't owned by the shop, or
                disappeared before the write
        """
        location = self.get_owned(db, shop_domain, location_id)
        fields = self.validate_and_normalize(submission)

        updated = self.crud.update(
            db=db,
            id=location.id,
            shop_domain=shop_domain,
            obj_in=fields
        )
        if not updated:
            logger.warning(f"Location {location.id} of {shop_domain} vanished before update")
            raise LocationNotFoundError()

        db.refresh(location)
        return location

    def delete(self, db: Session, shop_domain: str, location_id: Any) -> None:
        """
        Delete a location.

        Raises:
            LocationValidationError: If the id is invalid
            LocationNotFoundError: If the location isn't owned by the shop
        """
        location = self.get_owned(db, shop_domain, location_id)

        deleted = self.crud.delete(db=db, id=location.id, shop_domain=shop_domain)
        if not deleted:
            raise LocationNotFoundError()


# Create a singleton instance
location_service = LocationService()
