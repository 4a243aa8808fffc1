"""Application error hierarchy shared by services and blueprints."""


class ApplicationError(Exception):
    """Base class; ``name`` identifies the error kind, ``message`` is shown to callers."""
    name = 'ApplicationError'
    message = 'Application error'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    name = 'NotFoundError'
    message = 'No result for this search!'


class PaymentRequiredError(ApplicationError):
    name = 'PaymentRequired'
    message = 'Ticket payment is required'


class UnauthorizedError(ApplicationError):
    name = 'UnauthorizedError'
    message = 'You must be signed in to continue'


class ConflictError(ApplicationError):
    name = 'ConflictError'
    message = 'Conflict'


class InvalidDataError(ApplicationError):
    name = 'InvalidDataError'
    message = 'Invalid data'
