from app.crud.base import CRUDBase
from .location import location

__all__ = ["CRUDBase", "location"]
