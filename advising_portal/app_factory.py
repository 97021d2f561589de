# advising_portal/app_factory.py
from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_login import LoginManager
from sqlalchemy.exc import OperationalError
from advising_portal.init_db import db
from advising_portal.logging_config import setup_logging
from advising_portal.accounts.models import Account


def create_app(config_class='advising_portal.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logger = setup_logging(app.config.get('LOG_TIMEZONE'))

    db.init_app(app)

    CORS(
        app,
        origins=app.config['CORS_ORIGINS'],
        methods=['GET', 'POST', 'PUT', 'DELETE'],
        allow_headers=['Content-Type'],
    )

    login_manager = LoginManager()
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(Account, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'message': 'Unauthorized access. Please log in.'}), 401

    @app.before_request
    def log_request():
        logger.info(f"{request.method} {request.path}")

    @app.route('/')
    def index():
        return jsonify({'status': 200, 'message': 'Server is running successfully'})

    # Import and register blueprints
    from advising_portal.accounts.routes import user_bp as user_blueprint
    app.register_blueprint(user_blueprint, url_prefix='/user')

    with app.app_context():
        try:
            db.create_all()
        except OperationalError as e:
            logger.error(f"OperationalError during database initialization: {e}")

    return app
