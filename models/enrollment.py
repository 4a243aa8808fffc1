from app import db
from datetime import datetime
from sqlalchemy.orm import joinedload

class Enrollment(db.Model):
    __tablename__ = 'enrollments'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    cpf = db.Column(db.String(11), nullable=False)
    birthday = db.Column(db.DateTime, nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    address = db.relationship('Address', backref='enrollment', uselist=False, cascade='all, delete-orphan')
    ticket = db.relationship('Ticket', backref='enrollment', uselist=False, cascade='all, delete-orphan')

    @staticmethod
    def get_with_address_by_user_id(user_id):
        """Get a user's enrollment with its address, or None"""
        return Enrollment.query.options(joinedload(Enrollment.address)).filter_by(user_id=user_id).first()

    def __repr__(self):
        return f'<Enrollment user={self.user_id}>'


class Address(db.Model):
    __tablename__ = 'addresses'

    id = db.Column(db.Integer, primary_key=True)
    cep = db.Column(db.String(255), nullable=False)
    street = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(255), nullable=False)
    state = db.Column(db.String(255), nullable=False)
    number = db.Column(db.String(255), nullable=False)
    neighborhood = db.Column(db.String(255), nullable=False)
    address_detail = db.Column(db.String(255))
    enrollment_id = db.Column(db.Integer, db.ForeignKey('enrollments.id'), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
