from fastapi import HTTPException, status


class LocationValidationError(HTTPException):
    """Submitted fields or id failed validation. Always user-facing."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class LocationNotFoundError(HTTPException):
    """
    Raised for ids that don't exist AND for ids owned by another shop.

    Both cases share one message so a shop can't probe for other shops' records.
    """

    def __init__(self):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
