# models/result.py
from datetime import datetime


class AreaScore:
    """Summed weight of one area for a submission. Never persisted."""

    def __init__(self, area, total):
        self.area = area
        self.total = total

    def to_dict(self):
        return {'area': self.area, 'total': self.total}

    def __eq__(self, other):
        return isinstance(other, AreaScore) and (self.area, self.total) == (other.area, other.total)

    def __repr__(self):
        return f"AreaScore({self.area!r}, {self.total!r})"


class Result:
    """Outcome of one completed session, as shown and kept in the history"""

    def __init__(self, nickname, date, area, suggestions=None):
        self.nickname = nickname
        self.date = date
        self.area = area
        self.suggestions = tuple(suggestions or ())

    @classmethod
    def create(cls, nickname, area, suggestions, date_format='%d/%m/%Y', now=None):
        now = now or datetime.now()
        return cls(nickname, now.strftime(date_format), area, suggestions)

    @classmethod
    def from_dict(cls, data):
        return cls(
            nickname=data.get('nickname'),
            date=data.get('date'),
            area=data.get('area'),
            suggestions=data.get('suggestions', [])
        )

    def to_dict(self):
        return {
            'nickname': self.nickname,
            'date': self.date,
            'area': self.area,
            'suggestions': list(self.suggestions)
        }

    def __eq__(self, other):
        return isinstance(other, Result) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Result({self.nickname!r}, {self.date!r}, {self.area!r})"
