from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.dependencies import get_form_submission
from app.schemas.location import LocationResponse
from app.services.location import location_service
from app.core.shop_context import get_shop_domain
from app.core.logging_config import logger

router = APIRouter()

# Hidden field the edit page uses to turn its POST into a delete
DELETE_INTENT = "delete"


@router.get("", response_model=List[LocationResponse])
def get_locations(
    db: Session = Depends(get_db),
    _shop_domain: str = Depends(get_shop_domain)
):
    """
    Retrieve all locations of your shop, newest first.
    
    Args:
        db: Database session
        _shop_domain: Shop context (auto-set from session token)
    
    Returns:
        List of locations belonging to your shop
    """
    return location_service.list(db=db, shop_domain=_shop_domain)


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    submission: dict = Depends(get_form_submission),
    db: Session = Depends(get_db),
    _shop_domain: str = Depends(get_shop_domain)
):
    """
    Create a new location from the admin form.
    
    The shop is automatically identified from the session token.
    
    Args:
        submission: Raw form fields
        db: Database session
        _shop_domain: Shop context (auto-set from session token)
    
    Returns:
        Created location
        
    Raises:
        HTTPException 400: If name or address is missing
    """
    try:
        logger.info(f"Creating location: name={submission.get('name')}, shop={_shop_domain}")
        result = location_service.create(
            db=db,
            shop_domain=_shop_domain,
            submission=submission
        )
        logger.info(f"Location created successfully: id={result.id}")
        return result
    except Exception as e:
        logger.error(f"Error creating location: {type(e).__name__}: {str(e)}")
        raise


@router.get("/{location_id}", response_model=LocationResponse)
def get_location(
    location_id: str,
    db: Session = Depends(get_db),
    _shop_domain: str = Depends(get_shop_domain)
):
    """
    Retrieve a specific location by ID.
    
    Raises:
        HTTPException 400: If the id is not a positive integer
        HTTPException 404: If location not found
    """
    return location_service.get_owned(
        db=db,
        shop_domain=_shop_domain,
        location_id=location_id
    )


def _update(db: Session, shop_domain: str, location_id: str, submission: dict):
    try:
        logger.info(f"Updating location: id={location_id}, shop={shop_domain}")
        return location_service.update(
            db=db,
            shop_domain=shop_domain,
            location_id=location_id,
            submission=submission
        )
    except Exception as e:
        logger.error(f"Error updating location {location_id}: {type(e).__name__}: {str(e)}")
        raise


def _delete(db: Session, shop_domain: str, location_id: str) -> Response:
    try:
        logger.info(f"Deleting location: id={location_id}, shop={shop_domain}")
        location_service.delete(
            db=db,
            shop_domain=shop_domain,
            location_id=location_id
        )
    except Exception as e:
        logger.error(f"Error deleting location {location_id}: {type(e).__name__}: {str(e)}")
        raise
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{location_id}",
    response_model=LocationResponse,
    responses={204: {"description": "Location deleted"}}
)
def submit_location_form(
    location_id: str,
    submission: dict = Depends(get_form_submission),
    db: Session = Depends(get_db),
    _shop_domain: str = Depends(get_shop_domain)
):
    """
    Handle the edit page form: save changes, or delete when ``intent=delete``.
    
    Raises:
        HTTPException 400: If the id is invalid or name/address is missing
        HTTPException 404: If location not found
    """
    if submission.get("intent") == DELETE_INTENT:
        return _delete(db, _shop_domain, location_id)
    return _update(db, _shop_domain, location_id, submission)


@router.put("/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: str,
    submission: dict = Depends(get_form_submission),
    db: Session = Depends(get_db),
    _shop_domain: str = Depends(get_shop_domain)
):
    """
    Replace all editable fields of a location. Omitted checkboxes become false.
    
    Raises:
        HTTPException 400: If the id is invalid or name/address is missing
        HTTPException 404: If location not found
    """
    return _update(db, _shop_domain, location_id, submission)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(
    location_id: str,
    db: Session = Depends(get_db),
    _shop_domain: str = Depends(get_shop_domain)
):
    """
    Delete a location.
    
    Raises:
        HTTPException 400: If the id is invalid
        HTTPException 404: If location not found
    """
    return _delete(db, _shop_domain, location_id)
