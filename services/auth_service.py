"""
Sign-up, sign-in and sign-out backed by the sessions table
"""
import logging

from flask_jwt_extended import create_access_token, decode_token
from sqlalchemy.exc import IntegrityError

from app import db
from models.user import User, Session
from services.errors import ConflictError, InvalidDataError, UnauthorizedError
from utils.helpers import validate_email

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

def sign_up(email, password):
    if not validate_email(email):
        raise InvalidDataError('Invalid email format')
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidDataError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters long')

    email = email.strip().lower()
    if User.get_user_by_email(email):
        raise ConflictError('Email already exists')

    try:
        user = User.create_user(email, password)
    except IntegrityError:
        db.session.rollback()
        raise ConflictError('Email already exists')

    logger.info(f"Registered user {user.id}")
    return user

def sign_in(email, password):
    """Check credentials and open a session; returns (user, token)"""
    if not isinstance(email, str) or not isinstance(password, str):
        raise InvalidDataError('Email and password must be text')

    user = User.get_user_by_email(email.strip().lower())
    if not user or not user.check_password(password):
        raise UnauthorizedError('Invalid credentials')

    token = create_access_token(identity=str(user.id))
    jti = decode_token(token)['jti']

    db.session.add(Session(user_id=user.id, token=jti))
    db.session.commit()

    logger.info(f"Opened session for user {user.id}")
    return user, token

def sign_out(jti):
    session = Session.get_by_token(jti)
    if session is None:
        raise UnauthorizedError()

    db.session.delete(session)
    db.session.commit()
    logger.info(f"Closed session for user {session.user_id}")
