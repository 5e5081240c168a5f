from .location import Location
