from flask import Blueprint, jsonify
from datetime import datetime
from sqlalchemy import text
from app import db
import logging

api_status_bp = Blueprint('api_status', __name__)
logger = logging.getLogger(__name__)

@api_status_bp.route('/health', methods=['GET'])
def check_health():
    """Report whether the service and its database are reachable"""
    status = {
        'timestamp': datetime.now().isoformat(),
        'status': 'ok'
    }

    try:
        db.session.execute(text('SELECT 1'))
        status['database'] = 'working'
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        status['database'] = 'error'
        status['status'] = 'degraded'
        return jsonify(status), 503

    return jsonify(status)
