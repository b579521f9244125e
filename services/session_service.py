# services/session_service.py
import functools
import logging
import threading
import time
import uuid
from enum import Enum

from exceptions import (
    CatalogLoadError,
    InvalidAnswerError,
    InvalidNicknameError,
    InvalidTransitionError,
    NicknameTakenError,
    SessionFailedError,
    SubmissionError,
    VocationalTestError,
)
from models.result import Result
from services.answer_ledger import AnswerLedger
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


def synchronized(method):
    """Run a session transition while holding that session's lock"""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock:
            return method(self, *args, **kwargs)
    return wrapper


class SessionState(str, Enum):
    """Where the respondent is in the test"""
    REGISTERING = "registering"
    ANSWERING = "answering"
    SUBMITTING = "submitting"
    RESULT = "result"
    HISTORY = "history"
    FAILED = "failed"


class VocationalSession:
    """
    One respondent going through the test.

    Every mutation goes through a transition method. Events are handled
    strictly one at a time; exactly one question is live while answering.
    """

    def __init__(self, store, history_store, scoring_service=None,
                 date_format='%d/%m/%Y', session_id=None):
        self.session_id = session_id or str(uuid.uuid4())
        self.store = store
        self.history_store = history_store
        self.scoring_service = scoring_service or ScoringService()
        self.date_format = date_format
        self.lock = threading.RLock()
        self.last_activity = time.monotonic()

        self.questions = []
        self.error = None
        self._reset()

    def _reset(self):
        self.state = SessionState.REGISTERING
        self.user_id = None
        self.nickname = None
        self.current_index = 0
        self.ledger = AnswerLedger()
        self.result = None
        self.principal_score = None
        self.registration_error = None

    # -------------------------
    # Catalog
    # -------------------------
    def load_catalog(self):
        try:
            self.questions = self.store.load_catalog()
        except CatalogLoadError as e:
            self._fail(e)
            raise
        return self.questions

    @property
    def last_index(self):
        return len(self.questions) - 1

    def current_question(self):
        if self.state != SessionState.ANSWERING:
            return None
        return self.questions[self.current_index]

    # -------------------------
    # Transitions
    # -------------------------
    @synchronized
    def register(self, nickname):
        self._guard(SessionState.REGISTERING)

        nickname = (nickname or '').strip()
        if not nickname:
            raise InvalidNicknameError()
        if not self.questions:
            raise InvalidTransitionError("O catálogo de questões não foi carregado.")

        self.registration_error = None
        try:
            user = self.store.register_user(nickname)
        except NicknameTakenError as e:
            # Recoverable: stay here and let the respondent pick another one
            self.registration_error = e.detail
            raise
        except VocationalTestError as e:
            self._fail(e)
            raise

        self.user_id = user.user_id
        self.nickname = nickname
        self.current_index = 0
        self.state = SessionState.ANSWERING
        logger.info(f"Session {self.session_id}: '{nickname}' registered as {self.user_id}")

    @synchronized
    def answer(self, question_id, option_id):
        self._guard(SessionState.ANSWERING)

        question = self.questions[self.current_index]
        if question_id != question.question_id:
            raise InvalidTransitionError(
                f"Question {question_id!r} is not the current question ({question.question_id!r})"
            )
        if question.find_option(option_id) is None:
            raise InvalidAnswerError()

        self.ledger.record(question_id, option_id)
        logger.debug(f"Session {self.session_id}: question {question_id} -> option {option_id}")

        if self.current_index == self.last_index:
            self._submit()
        else:
            self.current_index += 1

    @synchronized
    def back(self):
        self._guard(SessionState.ANSWERING, SessionState.HISTORY)

        if self.state == SessionState.HISTORY:
            self.restart()
            return

        # The answer for the question being left stays in the ledger
        if self.current_index > 0:
            self.current_index -= 1

    @synchronized
    def view_history(self):
        self._guard(SessionState.RESULT)
        self.state = SessionState.HISTORY

    @synchronized
    def restart(self):
        """Back to registration from any state, dropping everything but the catalog"""
        failed = self.state == SessionState.FAILED
        self._reset()
        self.error = None
        logger.info(f"Session {self.session_id}: restarted")

        if failed and not self.questions:
            self.load_catalog()

    # -------------------------
    # Submission
    # -------------------------
    def _submit(self):
        self.state = SessionState.SUBMITTING
        logger.info(f"Session {self.session_id}: submitting {self.ledger.size()} answers")

        # Answers saved before a failing step are not rolled back
        try:
            self.store.save_answers(self.user_id, self.ledger.to_list())
            groups = self.store.fetch_answer_scoring(self.user_id)
            outcome = self.scoring_service.score_groups(groups)
            self.store.save_result(self.user_id, outcome.area, outcome.principal_score)

            result = Result.create(self.nickname, outcome.area, outcome.suggestions, self.date_format)
            try:
                self.history_store.append(result)
            except OSError as e:
                raise SubmissionError('save_history', str(e)) from e
        except SubmissionError as e:
            logger.error(
                f"Session {self.session_id}: submission failed at '{e.step}' "
                f"for respondent {self.user_id}: {e.detail}"
            )
            self._fail(e)
            raise

        self.result = result
        self.principal_score = outcome.principal_score
        self.state = SessionState.RESULT
        logger.info(f"Session {self.session_id}: result {outcome.area} ({outcome.principal_score})")

    # -------------------------
    # Helpers
    # -------------------------
    def _guard(self, *allowed):
        if self.state == SessionState.FAILED:
            raise SessionFailedError()
        if self.state not in allowed:
            raise InvalidTransitionError(f"Not allowed while {self.state.value}")

    def _fail(self, error):
        self.state = SessionState.FAILED
        self.error = {
            'type': type(error).__name__,
            'message': error.detail,
            'step': getattr(error, 'step', None)
        }

    def progress(self):
        if self.state != SessionState.ANSWERING:
            return None
        return {'index': self.current_index, 'total': len(self.questions)}

    @synchronized
    def to_dict(self):
        question = self.current_question()
        return {
            'session_id': self.session_id,
            'state': self.state.value,
            'nickname': self.nickname,
            'user_id': self.user_id,
            'progress': self.progress(),
            'question': question.prepare_for_client() if question else None,
            'selected_option': self._selected_option(question),
            'can_go_back': self.state == SessionState.ANSWERING and self.current_index > 0,
            'answered': self.ledger.size(),
            'result': self.result.to_dict() if self.result else None,
            'registration_error': self.registration_error,
            'error': self.error
        }

    def _selected_option(self, question):
        if question is None:
            return None
        answer = self.ledger.get(question.question_id)
        return answer.option_id if answer else None


class SessionManager:
    """
    Keeps one VocationalSession per session key.

    Sessions idle for longer than ``idle_timeout`` seconds are dropped the
    next time the registry is touched.
    """

    def __init__(self, store, history_store, scoring_service=None,
                 date_format='%d/%m/%Y', idle_timeout=1800, clock=time.monotonic):
        self.store = store
        self.history_store = history_store
        self.scoring_service = scoring_service or ScoringService()
        self.date_format = date_format
        self.idle_timeout = idle_timeout
        self.clock = clock
        self.sessions = {}
        self._lock = threading.Lock()

    def _new_session(self, session_key):
        session = VocationalSession(
            self.store,
            self.history_store,
            self.scoring_service,
            self.date_format,
            session_id=session_key
        )
        session.last_activity = self.clock()

        try:
            session.load_catalog()
        except CatalogLoadError:
            logger.error(f"Session {session.session_id}: catalog could not be loaded")

        return session

    def get_or_create(self, session_key):
        with self._lock:
            self._expire_idle()

            session = self.sessions.get(session_key)
            if session is None:
                session = self._new_session(session_key)
                self.sessions[session.session_id] = session
                logger.info(f"Created session {session.session_id}")

            session.last_activity = self.clock()
            return session

    def find(self, session_key):
        """Registered session for the key, or a fresh one that is not kept"""
        with self._lock:
            self._expire_idle()

            session = self.sessions.get(session_key) if session_key else None
            if session is None:
                return self._new_session(session_key)

            session.last_activity = self.clock()
            return session

    def rekey(self, old_key, new_key):
        """Move a session to a new key, so the old key stops resolving"""
        with self._lock:
            session = self.sessions.pop(old_key, None)
            if session is None:
                return None
            session.session_id = new_key
            self.sessions[new_key] = session
            return session

    def discard(self, session_key):
        with self._lock:
            self.sessions.pop(session_key, None)

    def _expire_idle(self):
        if not self.idle_timeout:
            return

        deadline = self.clock() - self.idle_timeout
        expired = [key for key, s in self.sessions.items() if s.last_activity < deadline]
        for key in expired:
            del self.sessions[key]
        if expired:
            logger.info(f"Expired {len(expired)} idle sessions")
