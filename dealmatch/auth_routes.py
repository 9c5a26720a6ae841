from flask import Blueprint, current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from dealmatch import bcrypt, db
from dealmatch.auth import generate_token
from dealmatch.errors import Conflict, Unauthorized
from dealmatch.schemas import MAX_PASSWORD_BYTES, LoginRequest, RegisterRequest
from dealmatch.utils import get_json_body, public_user

auth_bp = Blueprint('auth', __name__)

USER_BY_EMAIL_QUERY = text("""
    SELECT id, email, password, user_type, first_name, last_name
    FROM users
    WHERE email = :email
""")


def find_user_by_email(email):
    return db.session.execute(USER_BY_EMAIL_QUERY, {'email': email}).fetchone()


def create_user(email, password, user_type, first_name, last_name):
    """Hash the password and insert a user. Returns the stored row; the caller commits."""
    password_hash = bcrypt.generate_password_hash(password).decode('utf-8')
    insert_query = text("""
        INSERT INTO users (email, password, user_type, first_name, last_name)
        VALUES (:email, :password, :user_type, :first_name, :last_name)
    """)
    db.session.execute(insert_query, {
        'email': email,
        'password': password_hash,
        'user_type': user_type,
        'first_name': first_name,
        'last_name': last_name,
    })
    return find_user_by_email(email)


@auth_bp.route('/register', methods=['POST'])
def register():
    data = RegisterRequest.model_validate(get_json_body())

    try:
        # Check if the user already exists
        if find_user_by_email(data.email):
            raise Conflict('User already exists')

        user = create_user(data.email, data.password, data.user_type, data.first_name, data.last_name)
        db.session.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration of the same email
        db.session.rollback()
        raise Conflict('User already exists')
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Registration failed for %s: %s", data.email, e)
        return jsonify({'error': 'Internal server error'}), 500

    current_app.logger.info("Registered %s user id=%s", user.user_type, user.id)
    return jsonify({
        'message': 'User created successfully',
        'user': public_user(user._mapping),
        'token': generate_token(user._mapping),
    }), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    data = LoginRequest.model_validate(get_json_body())

    try:
        user = find_user_by_email(data.email)
    except SQLAlchemyError as e:
        current_app.logger.exception("Login lookup failed: %s", e)
        return jsonify({'error': 'Internal server error'}), 500

    # Same message for unknown email and wrong password. A password bcrypt
    # refuses to hash can never match a stored hash.
    if (not user
            or len(data.password.encode('utf-8')) > MAX_PASSWORD_BYTES
            or not bcrypt.check_password_hash(user.password, data.password)):
        raise Unauthorized('Invalid credentials')

    current_app.logger.info("User id=%s logged in", user.id)
    return jsonify({
        'message': 'Login successful',
        'user': public_user(user._mapping),
        'token': generate_token(user._mapping),
    }), 200
