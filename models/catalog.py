# models/catalog.py (questions, options and the scoring pairs attached to them)
from numbers import Number

from exceptions import DataIntegrityError


def _require(document, key, owner):
    if not isinstance(document, dict) or key not in document:
        raise DataIntegrityError(f"{owner} is missing '{key}': {document!r}")
    return document[key]


class ScoringPair:
    """One (area, weight) contribution of an option"""

    def __init__(self, area, value):
        self.area = area
        self.value = value

    @classmethod
    def from_document(cls, document):
        area = _require(document, 'area', 'Scoring pair')
        value = _require(document, 'value', 'Scoring pair')

        # bool is a Number subclass but never a valid weight
        if not isinstance(area, str) or not area:
            raise DataIntegrityError(f"Scoring pair has an invalid area: {area!r}")
        if isinstance(value, bool) or not isinstance(value, Number):
            raise DataIntegrityError(f"Scoring pair for '{area}' has a non-numeric value: {value!r}")

        return cls(area, value)

    def to_dict(self):
        return {'area': self.area, 'value': self.value}

    def __eq__(self, other):
        return isinstance(other, ScoringPair) and (self.area, self.value) == (other.area, other.value)

    def __repr__(self):
        return f"ScoringPair({self.area!r}, {self.value!r})"


class Option:
    def __init__(self, option_id, text, scoring=None):
        self.option_id = option_id
        self.text = text
        self.scoring = list(scoring or [])

    @classmethod
    def from_document(cls, document):
        scoring = document.get('scoring', []) if isinstance(document, dict) else None
        if not isinstance(scoring, list):
            raise DataIntegrityError(f"Option scoring must be a list: {document!r}")

        return cls(
            option_id=_require(document, 'option_id', 'Option'),
            text=_require(document, 'text', 'Option'),
            scoring=[ScoringPair.from_document(pair) for pair in scoring]
        )

    def to_dict(self, include_scoring=True):
        data = {'option_id': self.option_id, 'text': self.text}
        if include_scoring:
            data['scoring'] = [pair.to_dict() for pair in self.scoring]
        return data


class Question:
    """A catalog question. Immutable once loaded."""

    def __init__(self, question_id, text, options=None):
        self.question_id = question_id
        self.text = text
        self.options = list(options or [])

    @classmethod
    def from_document(cls, document):
        options = _require(document, 'options', 'Question')
        if not isinstance(options, list):
            raise DataIntegrityError(f"Question options must be a list: {document!r}")

        return cls(
            question_id=_require(document, 'question_id', 'Question'),
            text=_require(document, 'text', 'Question'),
            options=[Option.from_document(option) for option in options]
        )

    def find_option(self, option_id):
        """Return the option with the given id, or None"""
        for option in self.options:
            if option.option_id == option_id:
                return option
        return None

    def to_dict(self, include_scoring=True):
        return {
            'question_id': self.question_id,
            'text': self.text,
            'options': [option.to_dict(include_scoring) for option in self.options]
        }

    def prepare_for_client(self):
        """Question payload without the scoring pairs"""
        return self.to_dict(include_scoring=False)
