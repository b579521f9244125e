# database/vocational_store.py
import logging
import uuid

from pymongo.errors import DuplicateKeyError, PyMongoError

from exceptions import (
    CatalogLoadError,
    DataIntegrityError,
    NicknameTakenError,
    RegistrationError,
    SubmissionError,
)
from models.catalog import Question
from models.user import User

logger = logging.getLogger(__name__)

DUPLICATE_KEY_CODE = 11000


class VocationalStore:
    """
    Remote data store of the vocational test, backed by MongoDB.

    Supplies the question catalog, assigns respondent ids, and persists
    answers and computed results. Nothing here is retried: a failed call
    raises the matching error once and the caller decides what happens next.
    """

    def __init__(self, mongo):
        self.mongo = mongo

    # -------------------------
    # Catalog
    # -------------------------
    def load_catalog(self):
        """Return every question, with nested options and scoring pairs, ordered by id."""
        try:
            documents = list(
                self.mongo.get_questions_collection()
                .find({}, {'_id': 0})
                .sort('question_id', 1)
            )
        except PyMongoError as e:
            logger.error(f"Failed to load question catalog: {e}")
            raise CatalogLoadError() from e

        if not documents:
            logger.error("Question catalog is empty")
            raise CatalogLoadError("O catálogo de questões está vazio.")

        try:
            questions = [Question.from_document(doc) for doc in documents]
        except DataIntegrityError as e:
            logger.error(f"Question catalog has an invalid shape: {e}")
            raise CatalogLoadError(str(e)) from e

        logger.info(f"Loaded {len(questions)} questions")
        return questions

    # -------------------------
    # Registration
    # -------------------------
    def register_user(self, nickname):
        user = User({'user_id': str(uuid.uuid4()), 'nickname': nickname})

        try:
            self.mongo.get_users_collection().insert_one(user.to_dict())
        except DuplicateKeyError as e:
            if e.code == DUPLICATE_KEY_CODE:
                logger.info(f"Nickname '{nickname}' is already taken")
                raise NicknameTakenError(nickname) from e
            raise RegistrationError() from e
        except PyMongoError as e:
            logger.error(f"Failed to register '{nickname}': {e}")
            raise RegistrationError() from e

        logger.info(f"Registered respondent {user.user_id} as '{nickname}'")
        return user

    # -------------------------
    # Submission
    # -------------------------
    def save_answers(self, user_id, answers):
        documents = [answer.to_document(user_id) for answer in answers]
        if not documents:
            return

        try:
            self.mongo.get_answers_collection().insert_many(documents, ordered=True)
        except PyMongoError as e:
            logger.error(f"Failed to save answers for {user_id}: {e}")
            raise SubmissionError('save_answers') from e

        logger.debug(f"Saved {len(documents)} answers for {user_id}")

    def fetch_answer_scoring(self, user_id):
        """
        Scoring pairs of every stored answer of a respondent.

        Returns one group per stored answer, in storage order:
            [{"option_id": 12, "scoring": [{"area": ..., "value": ...}, ...]}, ...]
        """
        try:
            answers = list(
                self.mongo.get_answers_collection()
                .find({'user_id': user_id}, {'_id': 0, 'option_id': 1})
                .sort('_id', 1)
            )
            option_ids = list({a['option_id'] for a in answers if 'option_id' in a})
            questions = self.mongo.get_questions_collection().find(
                {'options.option_id': {'$in': option_ids}},
                {'_id': 0, 'options': 1}
            )

            option_lookup = {}
            for question in questions:
                for option in question.get('options', []):
                    option_lookup[option.get('option_id')] = option
        except PyMongoError as e:
            logger.error(f"Failed to compute result for {user_id}: {e}")
            raise SubmissionError('compute_result') from e

        groups = []
        for answer in answers:
            option_id = answer.get('option_id')
            option = option_lookup.get(option_id)
            if option is None:
                raise DataIntegrityError(f"Answer references unknown option {option_id!r}")
            groups.append({'option_id': option_id, 'scoring': option.get('scoring', [])})

        return groups

    def save_result(self, user_id, area, principal_percentage):
        # principal_percentage is the raw weighted sum of the winning area
        document = {
            'user_id': user_id,
            'area_principal': area,
            'principal_percentage': principal_percentage
        }

        try:
            self.mongo.get_results_collection().insert_one(document)
        except PyMongoError as e:
            logger.error(f"Failed to save result for {user_id}: {e}")
            raise SubmissionError('save_result') from e

        logger.info(f"Saved result for {user_id}: {area} ({principal_percentage})")
