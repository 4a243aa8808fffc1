from app import db
from datetime import datetime
import logging

logger = logging.getLogger(__name__)

DEMO_EMAIL = 'guest@example.com'
DEMO_PASSWORD = 'password123'

def init_sample_data():
    """Initialize database with sample hotels and a guest allowed to see them"""
    from models.hotel import Hotel

    # Check if data already exists
    if Hotel.query.first() is not None:
        logger.info("Sample data already exists. Skipping initialization.")
        return

    create_default_hotels()
    create_demo_guest()

def create_default_hotels():
    """Create sample hotels, each with a handful of rooms"""
    from models.hotel import Hotel, Room

    default_hotels = [
        {
            'name': 'Driven Resort',
            'image': 'https://images.unsplash.com/photo-1566073771259-6a8506099945',
            'rooms': [('101', 1), ('102', 2), ('103', 3), ('104', 2)]
        },
        {
            'name': 'Driven Palace',
            'image': 'https://images.unsplash.com/photo-1542314831-068cd1dbfeeb',
            'rooms': [('201', 2), ('202', 2), ('203', 3)]
        },
        {
            'name': 'Driven World',
            'image': 'https://images.unsplash.com/photo-1551882547-ff40c63fe5fa',
            'rooms': [('301', 1), ('302', 1)]
        }
    ]

    for hotel_data in default_hotels:
        hotel = Hotel(name=hotel_data['name'], image=hotel_data['image'])
        for room_name, capacity in hotel_data['rooms']:
            hotel.rooms.append(Room(name=room_name, capacity=capacity))
        db.session.add(hotel)

    db.session.commit()
    logger.info(f"Created {len(default_hotels)} hotels")

def create_demo_guest():
    """Create a user with an enrollment and a paid, hotel-inclusive ticket"""
    from models.user import User
    from models.enrollment import Enrollment, Address
    from models.ticket import TicketType, Ticket, TicketStatus, Payment

    user = User(email=DEMO_EMAIL)
    user.set_password(DEMO_PASSWORD)
    db.session.add(user)
    db.session.flush()

    enrollment = Enrollment(
        name='Demo Guest',
        cpf='12345678909',
        birthday=datetime(1990, 1, 1),
        phone='(21) 98999-9999',
        user_id=user.id
    )
    enrollment.address = Address(
        cep='22250-040',
        street='Rua Exemplo',
        city='Rio de Janeiro',
        state='RJ',
        number='100',
        neighborhood='Botafogo'
    )
    db.session.add(enrollment)

    ticket_type = TicketType(name='Presential + Hotel', price=600, is_remote=False, includes_hotel=True)
    db.session.add(ticket_type)
    db.session.flush()

    ticket = Ticket(ticket_type_id=ticket_type.id, enrollment_id=enrollment.id, status=TicketStatus.PAID)
    db.session.add(ticket)
    db.session.flush()

    db.session.add(Payment(ticket_id=ticket.id, value=ticket_type.price,
                           card_issuer='VISA', card_last_digits='4242'))
    db.session.commit()
    logger.info(f"Created demo guest {DEMO_EMAIL}")
