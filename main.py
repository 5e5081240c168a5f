from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.core.config import settings
from app.routers import location, storefront
from app.core.logging_config import logger

# Schema is managed by Alembic migrations

app = FastAPI(
    title="Pickup Locations API", 
    version="1.0.0",
    redirect_slashes=False  # Disable automatic redirects to prevent POST data loss
)

# The embedded admin runs inside the Shopify admin origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(location.router, prefix="/app/locations", tags=["Locations"])
app.include_router(storefront.router, prefix="/apps/pickup-delivery", tags=["Storefront"])


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        return {
            "status": "healthy",
            "database": "connected"
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unhealthy"
        )
