from app.services.location import location_service

__all__ = ["location_service"]
