from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from config import config
import logging
import os

# Initialize extensions
db = SQLAlchemy()
jwt = JWTManager()

def create_app(config_name=None):
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'default')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.json.sort_keys = False

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions with app
    db.init_app(app)
    jwt.init_app(app)
    CORS(app, origins=app.config.get('CORS_ORIGINS', '*'))

    # JWT error handlers
    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return {'error': 'Token has expired'}, 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return {'error': 'Invalid token'}, 401

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        return {'error': 'Authorization token required'}, 401

    @jwt.revoked_token_loader
    def revoked_token_callback(jwt_header, jwt_payload):
        return {'error': 'Session not found'}, 401

    # A token is only honoured while its session row exists
    @jwt.token_in_blocklist_loader
    def check_if_session_missing(jwt_header, jwt_payload):
        from models.user import Session
        return Session.get_by_token(jwt_payload['jti']) is None

    # Import models to ensure they're registered
    from models.user import User, Session
    from models.hotel import Hotel, Room
    from models.enrollment import Enrollment, Address
    from models.ticket import TicketType, Ticket, Payment

    # Register blueprints
    from api.auth import auth_bp
    from api.hotels import hotels_bp
    from api.api_status import api_status_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(hotels_bp, url_prefix='/hotels')
    app.register_blueprint(api_status_bp)

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return {'error': 'Resource not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(500)
    def internal_error(error):
        return {'error': 'Internal server error'}, 500

    return app
