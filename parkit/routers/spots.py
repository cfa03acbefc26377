# parkit/routers/spots.py
"""Parking spot availability endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from parkit.dao.parking_spot_dao import ParkingSpotDAO
from parkit.database import get_db
from parkit.models.parking_spot import ParkingType
from parkit.schemas.parking_spot import ParkingSpotOut

router = APIRouter()


@router.get("/spots", response_model=list[ParkingSpotOut], summary="Spots and their availability")
def list_spots(parking_type: Optional[ParkingType] = None, db: Session = Depends(get_db)):
    return ParkingSpotDAO(db).get_parking_spots(parking_type)
