import logging
import sys

def setup_logging():
    """
    Configure logging for the application.
    
    Sets up logging to stdout so container platforms pick it up.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    
    # Reduce SQLAlchemy noise in logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    
    return logging.getLogger("pickup_locations")


# Create global logger instance
logger = setup_logging()
