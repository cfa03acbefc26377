# parkit/routers/tickets.py
"""Ticket history endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from parkit.dao.ticket_dao import TicketDAO
from parkit.database import get_db
from parkit.schemas.ticket import TicketOut

router = APIRouter()


@router.get("/tickets", response_model=list[TicketOut], summary="Ticket history — filterable by plate")
def list_tickets(plate_number: Optional[str] = None, limit: int = 50, db: Session = Depends(get_db)):
    """Newest tickets first. Open tickets have no out_time."""
    tickets = TicketDAO(db).get_tickets(plate_number, limit)
    return [TicketOut.from_ticket(t) for t in tickets]
