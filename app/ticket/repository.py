# app/ticket/repository.py
from sqlalchemy.orm import Session
from app.ticket.models import Ticket


def find_all(db: Session) -> list[Ticket]:
    return db.query(Ticket).order_by(Ticket.id).all()


def find_by_id(db: Session, ticket_id: int) -> Ticket | None:
    return db.query(Ticket).filter(Ticket.id == ticket_id).first()


def find_by_owner(db: Session, owner_id: str) -> list[Ticket]:
    return db.query(Ticket).filter(Ticket.created_by == owner_id).order_by(Ticket.id).all()


def save(db: Session, ticket: Ticket) -> Ticket:
    db.add(ticket)
    db.commit()
    db.refresh(ticket)
    return ticket


def delete_by_id(db: Session, ticket_id: int) -> Ticket | None:
    """Delete a ticket; an unknown id is a no-op and returns None."""
    db_ticket = find_by_id(db, ticket_id)
    if not db_ticket:
        return None
    db.delete(db_ticket)
    db.commit()
    return db_ticket
