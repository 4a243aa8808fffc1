# Services package initialization
from .errors import (ApplicationError, NotFoundError, PaymentRequiredError,
                     UnauthorizedError, ConflictError, InvalidDataError)

__all__ = [
    'ApplicationError',
    'NotFoundError',
    'PaymentRequiredError',
    'UnauthorizedError',
    'ConflictError',
    'InvalidDataError'
]
