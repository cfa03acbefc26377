# parkit/dao/ticket_dao.py
"""
Ticket store: saving entry tickets, finding the open ticket for a plate,
recording the exit, and counting past visits for the recurring-user discount.
"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from parkit.models.ticket import Ticket
from parkit.utils.logger import get_logger

logger = get_logger(__name__)


class TicketDAO:
    def __init__(self, db: Session):
        self.db = db

    def save_ticket(self, ticket) -> bool:
        row = Ticket(
            parking_number=ticket.parking_spot.id,
            vehicle_reg_number=ticket.vehicle_reg_number,
            price=ticket.price,
            in_time=ticket.in_time,
            out_time=ticket.out_time,
        )
        try:
            self.db.add(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[Ticket] Error saving ticket for {ticket.vehicle_reg_number}: {e}", exc_info=True)
            return False
        ticket.id = row.id
        return True

    def get_ticket(self, vehicle_reg_number: str) -> Optional[Ticket]:
        """
        Most recent open ticket (no out time) for the plate, detached from the
        session so exit-time edits only reach the DB through update_ticket().
        """
        ticket = (
            self.db.query(Ticket)
            .filter(Ticket.vehicle_reg_number == vehicle_reg_number, Ticket.out_time == None)  # noqa: E711
            .order_by(Ticket.in_time.desc())
            .first()
        )
        if ticket is not None:
            self.db.expunge(ticket)
        return ticket

    def update_ticket(self, ticket) -> bool:
        try:
            updated = (
                self.db.query(Ticket)
                .filter(Ticket.id == ticket.id)
                .update({Ticket.price: ticket.price, Ticket.out_time: ticket.out_time})
            )
            if updated != 1:
                self.db.rollback()
                logger.error(f"[Ticket] Ticket {ticket.id} not found for update")
                return False
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[Ticket] Error updating ticket {ticket.id}: {e}", exc_info=True)
            return False

    def count_prior_tickets(self, vehicle_reg_number: str) -> int:
        """Number of completed visits (tickets with an out time) for the plate."""
        return self.db.query(func.count(Ticket.id)).filter(
            Ticket.vehicle_reg_number == vehicle_reg_number,
            Ticket.out_time != None,  # noqa: E711
        ).scalar()

    def get_tickets(self, vehicle_reg_number: Optional[str] = None, limit: int = 50) -> list:
        q = self.db.query(Ticket)
        if vehicle_reg_number:
            q = q.filter(Ticket.vehicle_reg_number == vehicle_reg_number)
        return q.order_by(Ticket.in_time.desc()).limit(limit).all()
