from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity
from services import hotels_service
from services.errors import NotFoundError, PaymentRequiredError
from utils.helpers import parse_numeric_id
import logging

logger = logging.getLogger(__name__)

hotels_bp = Blueprint('hotels', __name__)

def _error_response(error, operation):
    """Plain-text error body: 404 for not found, 402 for payment, 400 otherwise"""
    if isinstance(error, NotFoundError):
        status = 404
    elif isinstance(error, PaymentRequiredError):
        status = 402
    else:
        logger.error(f"Unexpected error while {operation}: {str(error)}")
        status = 400
    return str(error), status, {'Content-Type': 'text/plain; charset=utf-8'}

@hotels_bp.route('', methods=['GET'])
@jwt_required()
def get_hotels():
    """List every hotel for a user entitled to hotel accommodation"""
    try:
        user_id = int(get_jwt_identity())
        hotels = hotels_service.get_hotels(user_id)
        return jsonify([hotel.to_dict() for hotel in hotels])
    except Exception as e:
        return _error_response(e, "listing hotels")

@hotels_bp.route('/<hotel_id>', methods=['GET'])
@jwt_required()
def get_hotel_rooms(hotel_id):
    """Get one hotel with its rooms"""
    try:
        user_id = int(get_jwt_identity())
        hotel = hotels_service.get_hotel_rooms(parse_numeric_id(hotel_id), user_id)
        return jsonify(hotel.to_dict(include_rooms=True))
    except Exception as e:
        return _error_response(e, f"fetching rooms of hotel {hotel_id}")
