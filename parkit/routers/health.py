# parkit/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB + spot availability.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from parkit.database import get_db
from parkit.dao.parking_spot_dao import ParkingSpotDAO
from parkit.utils.clock import utc_now

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    """
    Returns:
    - Backend status
    - Database connectivity
    - Free spots per vehicle type
    """
    result = {
        "status": "ok",
        "timestamp": utc_now().isoformat(),
        "backend": "ok",
        "database": "unknown",
        "free_spots": {},
    }

    # Check database
    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
        for spot in ParkingSpotDAO(db).get_parking_spots():
            key = spot.parking_type.value
            result["free_spots"].setdefault(key, 0)
            if spot.available:
                result["free_spots"][key] += 1
    except SQLAlchemyError as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
