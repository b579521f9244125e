# mongodb.py
from pymongo import MongoClient, ASCENDING
from pymongo.server_api import ServerApi
from config import Config
import logging

logger = logging.getLogger(__name__)


class MongoDB:
    _instance = None

    def __init__(self, config=Config, client=None):
        timeout_ms = config.REMOTE_TIMEOUT_MS

        # The same timeout bounds server selection, connecting and every reply
        self.client = client or MongoClient(
            config.MONGO_URI,
            server_api=ServerApi('1'),
            retryWrites=False,
            retryReads=False,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
            socketTimeoutMS=timeout_ms,
            w='majority'
        )
        self.db = self.client[config.MONGO_DB_NAME]
        logger.info(f"MongoDB client ready for database '{config.MONGO_DB_NAME}'")

    @staticmethod
    def get_instance(config=Config):
        if MongoDB._instance is None:
            MongoDB._instance = MongoDB(config)
        return MongoDB._instance

    def ping(self):
        self.client.admin.command('ping')

    def get_questions_collection(self):
        return self.db.questions

    def get_users_collection(self):
        return self.db.users

    def get_answers_collection(self):
        return self.db.user_answers

    def get_results_collection(self):
        return self.db.results

    def init_database(self):
        """Create the indexes the store relies on"""
        try:
            # Nickname uniqueness is enforced here, not by the application
            self.db.users.create_index("nickname", unique=True)
            self.db.users.create_index("user_id", unique=True)

            self.db.questions.create_index("question_id", unique=True)
            self.db.questions.create_index("options.option_id")

            self.db.user_answers.create_index([("user_id", ASCENDING), ("question_id", ASCENDING)])
            self.db.results.create_index("user_id", unique=True)

            logger.info("✅ Database indexes initialized")

        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")
            raise
