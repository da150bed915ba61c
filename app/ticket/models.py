# app/ticket/models.py
from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    status = Column(String, default="Open", nullable=False)
    priority = Column(String, default="Medium", nullable=False)
    # owner; written once on create, never on update
    created_by = Column(String, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Ticket id={self.id} created_by={self.created_by!r}>"
