# routes/history.py
from flask import Blueprint, current_app, jsonify

from routes.quiz import current_test_session, rotate_session_key, session_response

history_bp = Blueprint('history', __name__)


def get_history_store():
    return current_app.extensions['history_store']


@history_bp.route('', methods=['GET'])
def list_history():
    """Stored results, oldest first"""
    results = get_history_store().list()
    return jsonify({
        "success": True,
        "results": [result.to_dict() for result in results]
    })


@history_bp.route('', methods=['DELETE'])
def clear_history():
    get_history_store().clear()
    return jsonify({"success": True, "results": []})


@history_bp.route('/view', methods=['POST'])
def view_history():
    test_session = current_test_session()
    test_session.view_history()
    results = get_history_store().list()
    return session_response(test_session, results=[result.to_dict() for result in results])


@history_bp.route('/back', methods=['POST'])
def leave_history():
    test_session = current_test_session()
    test_session.back()
    rotate_session_key(test_session)
    return session_response(test_session)
