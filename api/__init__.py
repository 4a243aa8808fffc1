# API package initialization
from .auth import auth_bp
from .hotels import hotels_bp
from .api_status import api_status_bp

__all__ = ['auth_bp', 'hotels_bp', 'api_status_bp']
