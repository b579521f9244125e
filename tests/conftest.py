"""
Pytest configuration and fixtures
"""
import sys
import uuid
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from config import TestingConfig
from exceptions import (
    CatalogLoadError,
    DataIntegrityError,
    NicknameTakenError,
    RegistrationError,
    SubmissionError,
)
from models.catalog import Question
from models.user import User
from services.history_store import HistoryStore
from services.session_service import VocationalSession

TECH = "Áreas Técnicas e Científicas"
CREATIVE = "Áreas Criativas"
HEALTH = "Áreas de Saúde e Bem-Estar"

CATALOG = [
    {
        "question_id": 1,
        "text": "Qual matéria você prefere?",
        "options": [
            {"option_id": 11, "text": "Matemática", "scoring": [{"area": TECH, "value": 3}]},
            {"option_id": 12, "text": "Artes", "scoring": [{"area": CREATIVE, "value": 1}]},
            {"option_id": 13, "text": "Nenhuma", "scoring": []},
        ]
    },
    {
        "question_id": 2,
        "text": "Onde você gostaria de trabalhar?",
        "options": [
            {"option_id": 21, "text": "Estúdio", "scoring": [{"area": CREATIVE, "value": 1}]},
            {"option_id": 22, "text": "Hospital", "scoring": [{"area": HEALTH, "value": 2}]},
            {"option_id": 23, "text": "Tanto faz", "scoring": []},
        ]
    },
    {
        "question_id": 3,
        "text": "O que você quer construir?",
        "options": [
            {"option_id": 31, "text": "Pontes", "scoring": [{"area": TECH, "value": 2}]},
            {"option_id": 32, "text": "Filmes", "scoring": [{"area": CREATIVE, "value": 2}]},
            {"option_id": 33, "text": "Nada", "scoring": []},
        ]
    },
]


class InMemoryStore:
    """VocationalStore stand-in keeping everything in dicts and lists"""

    def __init__(self, catalog=None):
        self.catalog = CATALOG if catalog is None else catalog
        self.users = {}
        self.answers = []
        self.results = []
        self.fail_on = set()
        self.calls = []

    def _maybe_fail(self, step):
        self.calls.append(step)
        if step in self.fail_on:
            if step == 'load_catalog':
                raise CatalogLoadError()
            if step == 'register_user':
                raise RegistrationError()
            raise SubmissionError(step)

    def load_catalog(self):
        self._maybe_fail('load_catalog')
        if not self.catalog:
            raise CatalogLoadError("O catálogo de questões está vazio.")
        return [Question.from_document(doc) for doc in self.catalog]

    def register_user(self, nickname):
        self._maybe_fail('register_user')
        if nickname in {u.nickname for u in self.users.values()}:
            raise NicknameTakenError(nickname)
        user = User({'user_id': str(uuid.uuid4()), 'nickname': nickname})
        self.users[user.user_id] = user
        return user

    def save_answers(self, user_id, answers):
        self._maybe_fail('save_answers')
        self.answers.extend(answer.to_document(user_id) for answer in answers)

    def fetch_answer_scoring(self, user_id):
        self._maybe_fail('compute_result')
        options = {
            option['option_id']: option
            for question in self.catalog
            for option in question['options']
        }
        groups = []
        for answer in self.answers:
            if answer['user_id'] != user_id:
                continue
            option = options.get(answer['option_id'])
            if option is None:
                raise DataIntegrityError(f"Answer references unknown option {answer['option_id']!r}")
            groups.append({'option_id': answer['option_id'], 'scoring': option['scoring']})
        return groups

    def save_result(self, user_id, area, principal_percentage):
        self._maybe_fail('save_result')
        self.results.append({
            'user_id': user_id,
            'area_principal': area,
            'principal_percentage': principal_percentage
        })


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def history_store(tmp_path):
    return HistoryStore(str(tmp_path / "history.json"))


@pytest.fixture
def test_session(store, history_store):
    session = VocationalSession(store, history_store)
    session.load_catalog()
    return session


@pytest.fixture
def app(store, history_store):
    from app import create_app

    return create_app(TestingConfig, store=store, history_store=history_store)


@pytest.fixture
def client(app):
    return app.test_client()
