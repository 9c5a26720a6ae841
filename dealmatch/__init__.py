import logging

from flask import Flask, current_app, jsonify
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from pydantic import ValidationError
from sqlalchemy import event
from sqlalchemy.engine import Engine
from werkzeug.exceptions import HTTPException

# Initialize extensions
db = SQLAlchemy()
bcrypt = Bcrypt()
jwt = JWTManager()


@event.listens_for(Engine, 'connect')
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES unless asked per connection
    if type(dbapi_connection).__module__.startswith('sqlite3'):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def create_app(config_object='dealmatch.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    bcrypt.init_app(app)
    jwt.init_app(app)

    CORS(app, resources={
        r"/api/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Authorization", "Content-Type"],
            "supports_credentials": True,
        }
    })

    register_error_handlers(app)

    # Import and register Blueprints
    from dealmatch.routes import bp as routes_bp
    from dealmatch.auth_routes import auth_bp
    from dealmatch.profile_routes import profile_bp
    from dealmatch.buyer_routes import buyer_bp
    from dealmatch.match_routes import match_bp

    app.register_blueprint(routes_bp, url_prefix='/api')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(profile_bp, url_prefix='/api/profile')
    app.register_blueprint(buyer_bp, url_prefix='/api/buyers')
    app.register_blueprint(match_bp, url_prefix='/api/matches')

    from dealmatch.seed import register_commands
    register_commands(app)

    # Create tables if they don't exist
    from dealmatch import models  # noqa: F401
    with app.app_context():
        db.create_all()

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )
    app.logger.setLevel(level)


def register_error_handlers(app):
    from dealmatch.errors import ApiError

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        body, status = error.to_response()
        return jsonify(body), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        details = error.errors(include_url=False, include_context=False, include_input=False)
        return jsonify({'error': 'Invalid request body', 'details': details}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception("Unhandled error: %s", error)
        db.session.rollback()
        return jsonify({'error': 'Internal server error'}), 500

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({'error': 'Access token required'}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        current_app.logger.debug("Rejected bearer token: %s", reason)
        return jsonify({'error': 'Invalid token'}), 403

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({'error': 'Invalid token'}), 403
