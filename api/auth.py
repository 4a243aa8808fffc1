from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt
from services import auth_service
from services.errors import ApplicationError, ConflictError, InvalidDataError, UnauthorizedError
from app import db
import logging

auth_bp = Blueprint('auth', __name__)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidDataError: 400,
    UnauthorizedError: 401,
    ConflictError: 409
}

def _status_for(error):
    for error_class, status in ERROR_STATUS.items():
        if isinstance(error, error_class):
            return status
    return 400

@auth_bp.route('/sign-up', methods=['POST'])
def sign_up():
    """User registration endpoint"""
    data = request.get_json(silent=True)

    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    try:
        user = auth_service.sign_up(data.get('email'), data.get('password'))
        return jsonify(user.to_dict()), 201

    except ApplicationError as e:
        return jsonify({'error': e.message}), _status_for(e)
    except Exception as e:
        logger.error(f"Error during registration: {str(e)}")
        db.session.rollback()
        return jsonify({'error': 'Registration failed'}), 500

@auth_bp.route('/sign-in', methods=['POST'])
def sign_in():
    """User login endpoint"""
    data = request.get_json(silent=True)

    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    email = data.get('email')
    password = data.get('password')

    if not email or not password:
        return jsonify({'error': 'Email and password are required'}), 400

    try:
        user, token = auth_service.sign_in(email, password)
        return jsonify({
            'user': user.to_dict(),
            'token': token
        })

    except ApplicationError as e:
        return jsonify({'error': e.message}), _status_for(e)
    except Exception as e:
        logger.error(f"Error during login: {str(e)}")
        db.session.rollback()
        return jsonify({'error': 'Login failed'}), 500

@auth_bp.route('/sign-out', methods=['POST'])
@jwt_required()
def sign_out():
    """Close the session the presented token belongs to"""
    try:
        auth_service.sign_out(get_jwt()['jti'])
        return jsonify({'message': 'Successfully logged out'})

    except ApplicationError as e:
        return jsonify({'error': e.message}), _status_for(e)
    except Exception as e:
        logger.error(f"Error during logout: {str(e)}")
        db.session.rollback()
        return jsonify({'error': 'Logout failed'}), 500
