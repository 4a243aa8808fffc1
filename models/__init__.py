# Models package initialization
from .user import User, Session
from .hotel import Hotel, Room
from .enrollment import Enrollment, Address
from .ticket import TicketStatus, TicketType, Ticket, Payment

__all__ = ['User', 'Session', 'Hotel', 'Room', 'Enrollment', 'Address',
           'TicketStatus', 'TicketType', 'Ticket', 'Payment']
