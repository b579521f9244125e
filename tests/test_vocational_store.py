from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from conftest import CATALOG, TECH
from database.vocational_store import VocationalStore
from exceptions import (
    CatalogLoadError,
    DataIntegrityError,
    NicknameTakenError,
    RegistrationError,
    SubmissionError,
)
from models.answer import Answer


@pytest.fixture
def mongo():
    return MagicMock()


@pytest.fixture
def vocational_store(mongo):
    return VocationalStore(mongo)


def test_load_catalog_parses_questions(mongo, vocational_store):
    mongo.get_questions_collection.return_value.find.return_value.sort.return_value = list(CATALOG)

    questions = vocational_store.load_catalog()

    assert [q.question_id for q in questions] == [1, 2, 3]
    assert questions[0].options[0].scoring[0].area == TECH
    mongo.get_questions_collection.return_value.find.return_value.sort.assert_called_once_with('question_id', 1)


def test_empty_catalog_is_a_load_fault(mongo, vocational_store):
    mongo.get_questions_collection.return_value.find.return_value.sort.return_value = []

    with pytest.raises(CatalogLoadError):
        vocational_store.load_catalog()


def test_transport_fault_is_a_load_fault(mongo, vocational_store):
    mongo.get_questions_collection.return_value.find.side_effect = ServerSelectionTimeoutError("timed out")

    with pytest.raises(CatalogLoadError):
        vocational_store.load_catalog()


def test_malformed_catalog_is_a_load_fault(mongo, vocational_store):
    mongo.get_questions_collection.return_value.find.return_value.sort.return_value = [
        {"question_id": 1, "text": "?"}
    ]

    with pytest.raises(CatalogLoadError):
        vocational_store.load_catalog()


def test_register_user_assigns_id(mongo, vocational_store):
    user = vocational_store.register_user("ana")

    assert user.nickname == "ana"
    assert user.user_id
    inserted = mongo.get_users_collection.return_value.insert_one.call_args[0][0]
    assert inserted['nickname'] == "ana"
    assert inserted['user_id'] == user.user_id


def test_duplicate_nickname(mongo, vocational_store):
    mongo.get_users_collection.return_value.insert_one.side_effect = DuplicateKeyError(
        "E11000 duplicate key error", code=11000
    )

    with pytest.raises(NicknameTakenError) as exc_info:
        vocational_store.register_user("ana")

    assert exc_info.value.nickname == "ana"
    assert not exc_info.value.fatal


def test_other_registration_fault(mongo, vocational_store):
    mongo.get_users_collection.return_value.insert_one.side_effect = ServerSelectionTimeoutError("timed out")

    with pytest.raises(RegistrationError):
        vocational_store.register_user("ana")


def test_save_answers_tags_respondent(mongo, vocational_store):
    vocational_store.save_answers("u1", [Answer(1, 11), Answer(2, 21)])

    documents = mongo.get_answers_collection.return_value.insert_many.call_args[0][0]
    assert documents == [
        {'user_id': 'u1', 'question_id': 1, 'option_id': 11},
        {'user_id': 'u1', 'question_id': 2, 'option_id': 21},
    ]


def test_save_answers_fault(mongo, vocational_store):
    mongo.get_answers_collection.return_value.insert_many.side_effect = ServerSelectionTimeoutError("timed out")

    with pytest.raises(SubmissionError) as exc_info:
        vocational_store.save_answers("u1", [Answer(1, 11)])

    assert exc_info.value.step == 'save_answers'


def test_fetch_answer_scoring_resolves_options(mongo, vocational_store):
    mongo.get_answers_collection.return_value.find.return_value.sort.return_value = [
        {'option_id': 11}, {'option_id': 21}, {'option_id': 31}
    ]
    mongo.get_questions_collection.return_value.find.return_value = [
        {'options': q['options']} for q in CATALOG
    ]

    groups = vocational_store.fetch_answer_scoring("u1")

    assert groups == [
        {'option_id': 11, 'scoring': [{"area": TECH, "value": 3}]},
        {'option_id': 21, 'scoring': [{"area": "Áreas Criativas", "value": 1}]},
        {'option_id': 31, 'scoring': [{"area": TECH, "value": 2}]},
    ]
    query = mongo.get_answers_collection.return_value.find.call_args[0][0]
    assert query == {'user_id': 'u1'}


def test_fetch_answer_scoring_unknown_option(mongo, vocational_store):
    mongo.get_answers_collection.return_value.find.return_value.sort.return_value = [{'option_id': 999}]
    mongo.get_questions_collection.return_value.find.return_value = []

    with pytest.raises(DataIntegrityError):
        vocational_store.fetch_answer_scoring("u1")


def test_fetch_answer_scoring_fault(mongo, vocational_store):
    mongo.get_answers_collection.return_value.find.side_effect = ServerSelectionTimeoutError("timed out")

    with pytest.raises(SubmissionError) as exc_info:
        vocational_store.fetch_answer_scoring("u1")

    assert exc_info.value.step == 'compute_result'


def test_save_result(mongo, vocational_store):
    vocational_store.save_result("u1", TECH, 5)

    mongo.get_results_collection.return_value.insert_one.assert_called_once_with({
        'user_id': 'u1',
        'area_principal': TECH,
        'principal_percentage': 5
    })


def test_save_result_fault(mongo, vocational_store):
    mongo.get_results_collection.return_value.insert_one.side_effect = ServerSelectionTimeoutError("timed out")

    with pytest.raises(SubmissionError) as exc_info:
        vocational_store.save_result("u1", TECH, 5)

    assert exc_info.value.step == 'save_result'
