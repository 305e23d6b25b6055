# backend/app_factory.py
from flask import Flask, jsonify
from sqlalchemy.exc import OperationalError
from werkzeug.exceptions import HTTPException
from backend.init_db import db
from backend.logging_config import setup_logging
from backend.authentication.views import init_otp_store

logger = setup_logging()


def create_app(config_class='backend.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    init_otp_store(app)

    # Import and register blueprints
    from backend.authentication.routes import auth_bp as auth_blueprint
    app.register_blueprint(auth_blueprint, url_prefix='/auth')

    from backend.vehicles.routes import vehicles_bp as vehicles_blueprint
    app.register_blueprint(vehicles_blueprint, url_prefix='/vehicles')

    from backend.messaging.routes import messaging_bp as messaging_blueprint
    app.register_blueprint(messaging_blueprint, url_prefix='/messages')

    @app.route('/')
    def index():
        return 'Backend is running successfully'

    @app.after_request
    def add_cors_headers(response):
        response.headers['Access-Control-Allow-Origin'] = app.config.get('CORS_ORIGINS', '*')
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, OPTIONS'
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'message': e.description}), e.code

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f"Unhandled error: {getattr(e, 'original_exception', e)}")
        return jsonify({'message': 'Server error'}), 500

    with app.app_context():
        # Register models with the metadata before creating tables
        from backend.authentication.models import User  # noqa: F401
        from backend.messaging.models import Message  # noqa: F401
        try:
            db.create_all()
        except OperationalError as e:
            app.logger.error(f"OperationalError during database initialization: {e}")

    return app
