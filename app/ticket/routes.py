# app/ticket/routes.py
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.auth.claims import Principal
from app.auth.dependencies import get_principal
from app.core.database import get_db
from app.ticket.cache import TicketCache, get_ticket_cache
from app.ticket.schemas import TicketCreate, TicketOut, TicketUpdate
from app.ticket import services as ticket_service

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])


@router.post("", response_model=TicketOut, status_code=201)
def create(
    ticket: TicketCreate,
    db: Session = Depends(get_db),
    cache: TicketCache = Depends(get_ticket_cache),
    principal: Principal = Depends(get_principal),
):
    return ticket_service.create_ticket(db, cache, principal, ticket)


@router.get("", response_model=list[TicketOut])
def list_all(db: Session = Depends(get_db), principal: Principal = Depends(get_principal)):
    return ticket_service.list_all_tickets(db, principal)


@router.get("/my", response_model=list[TicketOut])
def list_mine(
    db: Session = Depends(get_db),
    cache: TicketCache = Depends(get_ticket_cache),
    principal: Principal = Depends(get_principal),
):
    return ticket_service.list_my_tickets(db, cache, principal)


@router.get("/{ticket_id}", response_model=TicketOut)
def get(
    ticket_id: int,
    db: Session = Depends(get_db),
    cache: TicketCache = Depends(get_ticket_cache),
    principal: Principal = Depends(get_principal),
):
    return ticket_service.get_ticket(db, cache, principal, ticket_id)


@router.put("/{ticket_id}", response_model=TicketOut)
def update(
    ticket_id: int,
    ticket: TicketUpdate,
    db: Session = Depends(get_db),
    cache: TicketCache = Depends(get_ticket_cache),
    principal: Principal = Depends(get_principal),
):
    return ticket_service.update_ticket(db, cache, principal, ticket_id, ticket)


@router.delete("/{ticket_id}", status_code=204, response_class=Response)
def delete(
    ticket_id: int,
    db: Session = Depends(get_db),
    cache: TicketCache = Depends(get_ticket_cache),
    principal: Principal = Depends(get_principal),
):
    ticket_service.delete_ticket(db, cache, principal, ticket_id)
    return Response(status_code=204)
