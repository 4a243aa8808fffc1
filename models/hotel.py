from app import db
from datetime import datetime
from sqlalchemy.orm import selectinload

def _isoformat(value):
    return value.isoformat() if value else None

class Hotel(db.Model):
    __tablename__ = 'hotels'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    image = db.Column(db.String(500), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    rooms = db.relationship('Room', backref='hotel', lazy='select', cascade='all, delete-orphan',
                            order_by='Room.id')

    def to_dict(self, include_rooms=False):
        """Convert hotel to its JSON shape, optionally with the nested Rooms list"""
        data = {
            'id': self.id,
            'name': self.name,
            'image': self.image,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at)
        }

        if include_rooms:
            data['Rooms'] = [room.to_dict() for room in self.rooms]

        return data

    @staticmethod
    def get_hotels():
        """All hotels, in storage order"""
        return Hotel.query.all()

    @staticmethod
    def get_hotel_with_rooms(hotel_id):
        """First hotel matching hotel_id with its rooms loaded, or None"""
        if hotel_id is None:
            return None
        return Hotel.query.options(selectinload(Hotel.rooms)).filter_by(id=hotel_id).first()

    def __repr__(self):
        return f'<Hotel {self.name}>'


class Room(db.Model):
    __tablename__ = 'rooms'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    capacity = db.Column(db.Integer, nullable=False)
    hotel_id = db.Column(db.Integer, db.ForeignKey('hotels.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint('capacity > 0', name='room_capacity_positive'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'capacity': self.capacity,
            'hotelId': self.hotel_id,
            'createdAt': _isoformat(self.created_at),
            'updatedAt': _isoformat(self.updated_at)
        }

    def __repr__(self):
        return f'<Room {self.name} hotel={self.hotel_id}>'
