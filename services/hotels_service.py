"""
Hotel listing gated by the user's enrollment and ticket
"""
import logging

from models.hotel import Hotel
from models.ticket import Ticket, TicketStatus
from models.enrollment import Enrollment
from services.errors import NotFoundError, PaymentRequiredError

logger = logging.getLogger(__name__)

def validate_hotel_access(user_id):
    """
    Raise unless the user holds a paid, in-person ticket that includes hotel.

    Checks run in order: ticket and enrollment exist (NotFoundError), ticket
    is not merely reserved (PaymentRequiredError), ticket type is not remote
    and includes hotel (PaymentRequiredError).
    """
    ticket = Ticket.get_ticket_by_user_id(user_id)
    enrollment = Enrollment.get_with_address_by_user_id(user_id)
    if not ticket or not enrollment:
        logger.info(f"User {user_id} has no ticket or enrollment")
        raise NotFoundError()

    if ticket.status == TicketStatus.RESERVED:
        logger.info(f"User {user_id} ticket {ticket.id} is not paid")
        raise PaymentRequiredError()

    ticket_type = Ticket.get_ticket_with_type_by_id(ticket.id).ticket_type
    if ticket_type.is_remote or not ticket_type.includes_hotel:
        logger.info(f"User {user_id} ticket type {ticket_type.id} does not grant hotel access")
        raise PaymentRequiredError()

def get_hotels(user_id):
    validate_hotel_access(user_id)

    hotels = Hotel.get_hotels()
    if not hotels:
        raise NotFoundError()

    return hotels

def get_hotel_rooms(hotel_id, user_id):
    validate_hotel_access(user_id)

    hotel = Hotel.get_hotel_with_rooms(hotel_id)
    if not hotel:
        raise NotFoundError()

    return hotel
