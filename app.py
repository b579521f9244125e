from flask import Flask, jsonify
import logging
import os
from config import get_config
from database.mongodb import MongoDB
from database.vocational_store import VocationalStore
from exceptions import (
    InvalidAnswerError,
    InvalidNicknameError,
    NicknameTakenError,
    VocationalTestError,
)
from routes.quiz import quiz_bp, current_test_session, error_response
from routes.history import history_bp
from services.area_mapper import AreaMapper
from services.history_store import HistoryStore
from services.scoring_service import ScoringService
from services.session_service import SessionManager

logger = logging.getLogger(__name__)

BAD_REQUEST_ERRORS = (InvalidAnswerError, InvalidNicknameError)


def status_for(error):
    if error.fatal:
        return 500
    if isinstance(error, BAD_REQUEST_ERRORS):
        return 400
    # NicknameTakenError, InvalidTransitionError, SessionFailedError
    return 409


def create_app(config_class=None, store=None, history_store=None):
    config_class = config_class or get_config()

    logging.basicConfig(
        level=getattr(logging, str(config_class.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s - %(message)s'
    )

    app = Flask(__name__)
    app.config.from_object(config_class)

    if store is None:
        store = VocationalStore(MongoDB.get_instance(config_class))
    if history_store is None:
        history_store = HistoryStore(config_class.HISTORY_FILE, config_class.HISTORY_KEY)

    scoring_service = ScoringService(AreaMapper(config_class.AREA_MAPPING))
    app.extensions['history_store'] = history_store
    app.extensions['session_manager'] = SessionManager(
        store,
        history_store,
        scoring_service,
        date_format=config_class.RESULT_DATE_FORMAT,
        idle_timeout=config_class.SESSION_IDLE_TIMEOUT_SECONDS
    )

    # Register blueprints
    app.register_blueprint(quiz_bp, url_prefix='/api/quiz')
    app.register_blueprint(history_bp, url_prefix='/api/history')

    @app.errorhandler(VocationalTestError)
    def handle_vocational_error(error):
        if isinstance(error, NicknameTakenError):
            logger.info(f"Registration conflict: {error.detail}")
        elif error.fatal:
            logger.error(f"Fatal session error: {type(error).__name__}: {error.detail}")
        return error_response(current_test_session(create=False), error, status_for(error))

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"})

    return app


if __name__ == '__main__':
    config_class = get_config()

    # Initialize database
    try:
        MongoDB.get_instance(config_class).init_database()
        print("✅ Database initialized successfully")
    except Exception as e:
        print(f"❌ Database initialization failed: {e}")

    app = create_app(config_class)
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=config_class.DEBUG)
