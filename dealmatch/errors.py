"""Error types raised by the route handlers.

Each error carries the HTTP status it is rendered with; ``create_app`` turns
any of them into a ``{"error": message}`` JSON body.
"""


class ApiError(Exception):
    status_code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_response(self):
        return {'error': self.message}, self.status_code


class InvalidArgument(ApiError):
    status_code = 400
    message = 'Invalid request body'


class Conflict(ApiError):
    # Duplicate registration has always been reported as a 400
    status_code = 400
    message = 'User already exists'


class Unauthorized(ApiError):
    status_code = 401
    message = 'Invalid credentials'


class Forbidden(ApiError):
    status_code = 403
    message = 'Forbidden'


class NotFound(ApiError):
    status_code = 404
    message = 'Not found'
