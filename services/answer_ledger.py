# services/answer_ledger.py
from models.answer import Answer


class AnswerLedger:
    """
    Current answers of a session, at most one per question.

    Answering a question again drops the earlier entry and appends the new
    one, so the order is most-recent-selection order, not question order.
    """

    def __init__(self):
        self._answers = []

    def record(self, question_id, option_id):
        self._answers = [a for a in self._answers if a.question_id != question_id]
        answer = Answer(question_id, option_id)
        self._answers.append(answer)
        return answer

    def get(self, question_id):
        for answer in self._answers:
            if answer.question_id == question_id:
                return answer
        return None

    def to_list(self):
        return list(self._answers)

    def is_empty(self):
        return not self._answers

    def size(self):
        return len(self._answers)
