class Answer:
    """The option a respondent picked for one question"""

    def __init__(self, question_id, option_id):
        self.question_id = question_id
        self.option_id = option_id

    def to_dict(self):
        return {'question_id': self.question_id, 'option_id': self.option_id}

    def to_document(self, user_id):
        """Answer tagged with the respondent id, as stored remotely"""
        return {
            'user_id': user_id,
            'question_id': self.question_id,
            'option_id': self.option_id
        }

    def __eq__(self, other):
        return isinstance(other, Answer) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Answer(question_id={self.question_id!r}, option_id={self.option_id!r})"
