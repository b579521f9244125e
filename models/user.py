# models/user.py
from datetime import datetime, timezone


class User:
    def __init__(self, user_data):
        self.user_id = user_data.get('user_id')
        self.nickname = user_data.get('nickname')
        self.created_at = user_data.get('created_at', datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'nickname': self.nickname,
            'created_at': self.created_at
        }
