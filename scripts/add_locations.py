"""
python -m scripts.add_locations <shop-domain>
"""

import sys

sys.path.insert(0, ".")

from dotenv import load_dotenv
load_dotenv()

from app.database import SessionLocal
from app.services.location import location_service


def add_locations(shop_domain: str):
    """Add sample pickup locations for a development shop."""
    submissions = [
        {"name": "Centrum", "address": "Oudegracht 120", "city": "Utrecht", "zipcode": "3511 AX",
         "country": "Netherlands", "showAddress": "on", "showCity": "on", "offersPickup": "on"},
        {"name": "Warehouse", "address": "Industrieweg 8", "city": "Nieuwegein", "zipcode": "3433 NL",
         "country": "Netherlands", "showCity": "on", "offersPickup": "on", "offersDelivery": "on"},
        {"name": "Harbour", "address": "Kop van Zuid 1", "apartment": "Unit 4", "city": "Rotterdam",
         "country": "Netherlands", "showAddress": "on", "showCity": "on", "showCountry": "on",
         "offersDelivery": "on"},
    ]

    db = SessionLocal()

    try:
        for submission in submissions:
            location = location_service.create(db, shop_domain, submission)
            print(f"Added: {location.name} (id={location.id})")

        print(f"\nSuccessfully added {len(submissions)} locations for {shop_domain}")

    except Exception as e:
        db.rollback()
        print(f"Error: {e}")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python -m scripts.add_locations <shop-domain>")
    add_locations(sys.argv[1])
