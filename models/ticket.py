from app import db
from datetime import datetime
from sqlalchemy.orm import joinedload
import enum

class TicketStatus(enum.Enum):
    RESERVED = 'RESERVED'
    PAID = 'PAID'

class TicketType(db.Model):
    __tablename__ = 'ticket_types'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Integer, nullable=False)
    is_remote = db.Column(db.Boolean, nullable=False)
    includes_hotel = db.Column(db.Boolean, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    tickets = db.relationship('Ticket', back_populates='ticket_type', lazy='dynamic')

    def __repr__(self):
        return f'<TicketType {self.name}>'


class Ticket(db.Model):
    __tablename__ = 'tickets'

    id = db.Column(db.Integer, primary_key=True)
    ticket_type_id = db.Column(db.Integer, db.ForeignKey('ticket_types.id'), nullable=False)
    enrollment_id = db.Column(db.Integer, db.ForeignKey('enrollments.id'), unique=True, nullable=False)
    status = db.Column(db.Enum(TicketStatus), nullable=False, default=TicketStatus.RESERVED)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    ticket_type = db.relationship('TicketType', back_populates='tickets')
    payments = db.relationship('Payment', backref='ticket', lazy='dynamic', cascade='all, delete-orphan')

    @staticmethod
    def get_ticket_by_user_id(user_id):
        """Get the ticket attached to a user's enrollment, or None"""
        from models.enrollment import Enrollment

        return (Ticket.query
                .options(joinedload(Ticket.ticket_type))
                .join(Enrollment, Ticket.enrollment_id == Enrollment.id)
                .filter(Enrollment.user_id == user_id)
                .first())

    @staticmethod
    def get_ticket_with_type_by_id(ticket_id):
        return Ticket.query.options(joinedload(Ticket.ticket_type)).filter_by(id=ticket_id).first()

    def __repr__(self):
        return f'<Ticket {self.id} {self.status.value}>'


class Payment(db.Model):
    __tablename__ = 'payments'

    id = db.Column(db.Integer, primary_key=True)
    ticket_id = db.Column(db.Integer, db.ForeignKey('tickets.id'), nullable=False, index=True)
    value = db.Column(db.Integer, nullable=False)
    card_issuer = db.Column(db.String(255), nullable=False)
    card_last_digits = db.Column(db.String(4), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
