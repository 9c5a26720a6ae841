from functools import wraps

from flask_jwt_extended import create_access_token, get_jwt, get_jwt_identity, verify_jwt_in_request

from dealmatch.errors import Forbidden


def generate_token(user):
    """
    Generate a bearer token for the given user row.

    The subject is the user id; email and role ride along as extra claims so
    handlers can branch on the role without a database round trip.
    """
    return create_access_token(
        identity=str(user['id']),
        additional_claims={'email': user['email'], 'userType': user['user_type']},
    )


def current_identity():
    """Return ``(user_id, user_type)`` for the verified token of this request."""
    return int(get_jwt_identity()), get_jwt().get('userType')


def role_required(role, message):
    """
    Decorator to protect endpoints that only one side of the market may call.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            verify_jwt_in_request()
            _, user_type = current_identity()
            if user_type != role:
                raise Forbidden(message)
            return f(*args, **kwargs)
        return decorated_function
    return decorator
