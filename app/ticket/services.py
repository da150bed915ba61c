# app/ticket/services.py
"""Ticket operations: store access, caching and authorization in one place.

Every function takes the caller's ``Principal`` explicitly. Reads go
through the cache and fall back to the store; writes hit the store first
and then evict the affected cache entries before returning.
"""
import logging

from sqlalchemy.orm import Session

from app.auth.claims import Principal
from app.auth.policy import Action, is_allowed
from app.core.errors import Forbidden, NotFound
from app.ticket import repository
from app.ticket.cache import TicketCache
from app.ticket.models import Ticket
from app.ticket.schemas import MUTABLE_FIELDS, TicketCreate, TicketOut, TicketUpdate

log = logging.getLogger(__name__)


def _authorize(principal: Principal, action: Action, owner_id: str | None = None) -> None:
    if not is_allowed(principal.subject_id, principal.roles, owner_id, action):
        log.info("Denied %s to %s (owner=%s)", action.value, principal.subject_id, owner_id)
        raise Forbidden()


def _fetch(db: Session, cache: TicketCache, ticket_id: int) -> TicketOut:
    cached, generation = cache.lookup_by_id(ticket_id)
    if cached is not None:
        return cached
    db_ticket = repository.find_by_id(db, ticket_id)
    if not db_ticket:
        raise NotFound()
    ticket = TicketOut.model_validate(db_ticket)
    # dropped if a write evicted the id while we were loading
    cache.put_by_id(ticket_id, ticket, generation)
    return ticket


def create_ticket(db: Session, cache: TicketCache, principal: Principal, payload: TicketCreate) -> TicketOut:
    _authorize(principal, Action.CREATE)
    db_ticket = Ticket(**payload.model_dump(include=set(MUTABLE_FIELDS)), created_by=principal.subject_id)
    ticket = TicketOut.model_validate(repository.save(db, db_ticket))
    cache.evict_by_owner(ticket.created_by)
    log.debug("Created ticket %s for %s", ticket.id, ticket.created_by)
    return ticket


def list_all_tickets(db: Session, principal: Principal) -> list[TicketOut]:
    _authorize(principal, Action.READ_ALL)
    return [TicketOut.model_validate(t) for t in repository.find_all(db)]


def list_my_tickets(db: Session, cache: TicketCache, principal: Principal) -> list[TicketOut]:
    _authorize(principal, Action.READ_MINE)
    owner_id = principal.subject_id
    cached, generation = cache.lookup_by_owner(owner_id)
    if cached is None:
        cached = tuple(TicketOut.model_validate(t) for t in repository.find_by_owner(db, owner_id))
        cache.put_by_owner(owner_id, cached, generation)
    return list(cached)


def get_ticket(db: Session, cache: TicketCache, principal: Principal, ticket_id: int) -> TicketOut:
    # load first: the decision depends on who owns the ticket
    ticket = _fetch(db, cache, ticket_id)
    _authorize(principal, Action.READ_ONE, ticket.created_by)
    return ticket


def update_ticket(
    db: Session, cache: TicketCache, principal: Principal, ticket_id: int, payload: TicketUpdate
) -> TicketOut:
    db_ticket = repository.find_by_id(db, ticket_id)
    if not db_ticket:
        raise NotFound()
    _authorize(principal, Action.UPDATE, db_ticket.created_by)

    # created_by is not in MUTABLE_FIELDS: the owner never changes
    for field, value in payload.model_dump(include=set(MUTABLE_FIELDS)).items():
        setattr(db_ticket, field, value)
    ticket = TicketOut.model_validate(repository.save(db, db_ticket))

    cache.evict_by_id(ticket_id)
    cache.evict_by_owner(ticket.created_by)
    log.debug("Updated ticket %s by %s", ticket_id, principal.subject_id)
    return ticket


def delete_ticket(db: Session, cache: TicketCache, principal: Principal, ticket_id: int) -> None:
    _authorize(principal, Action.DELETE)
    deleted = repository.delete_by_id(db, ticket_id)
    cache.evict_by_id(ticket_id)
    if deleted is not None:
        cache.evict_by_owner(deleted.created_by)
        log.debug("Deleted ticket %s by %s", ticket_id, principal.subject_id)
