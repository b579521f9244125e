# routes/quiz.py
import uuid

from flask import Blueprint, current_app, jsonify, request, session

from exceptions import InvalidAnswerError

quiz_bp = Blueprint('quiz', __name__)


def get_session_manager():
    return current_app.extensions['session_manager']


def current_test_session(create=True):
    """
    VocationalSession bound to the caller's cookie session.

    With create=False nothing is registered for callers without a live
    session; they get a fresh session that is not kept.
    """
    if not create:
        return get_session_manager().find(session.get('session_key'))

    if 'session_key' not in session:
        session['session_key'] = str(uuid.uuid4())
    return get_session_manager().get_or_create(session['session_key'])


def rotate_session_key(test_session):
    """Give a reset session a new key; the previous key no longer resolves"""
    new_key = str(uuid.uuid4())
    get_session_manager().rekey(test_session.session_id, new_key)
    session['session_key'] = new_key


def error_response(test_session, error, status):
    return jsonify({
        "success": False,
        "error": error.detail,
        "error_type": type(error).__name__,
        "fatal": error.fatal,
        "session": test_session.to_dict()
    }), status


def session_response(test_session, **extra):
    payload = {"success": True, "session": test_session.to_dict()}
    payload.update(extra)
    return jsonify(payload)


@quiz_bp.route('/state', methods=['GET'])
def get_state():
    return session_response(current_test_session(create=False))


@quiz_bp.route('/register', methods=['POST'])
def register():
    """
    Expected payload:
    {
      nickname: str
    }
    """
    test_session = current_test_session()
    data = request.get_json(silent=True) or {}

    test_session.register(data.get('nickname'))
    return session_response(test_session)


@quiz_bp.route('/answer', methods=['POST'])
def answer():
    """
    Expected payload:
    {
      question_id: int,
      option_id: int
    }
    Returns the next question, or the result once the last question is answered.
    """
    test_session = current_test_session()
    data = request.get_json(silent=True) or {}

    question_id = data.get('question_id')
    option_id = data.get('option_id')
    if question_id is None or option_id is None:
        raise InvalidAnswerError("Missing question_id or option_id")

    test_session.answer(question_id, option_id)
    return session_response(test_session)


@quiz_bp.route('/back', methods=['POST'])
def back():
    test_session = current_test_session()
    test_session.back()
    return session_response(test_session)


@quiz_bp.route('/restart', methods=['POST'])
def restart():
    test_session = current_test_session()
    test_session.restart()
    rotate_session_key(test_session)
    return session_response(test_session)
