import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

HISTORY_KEY = 'testHistory'
NO_AREA = 'N/A'


class Config:
    """Base configuration"""
    TESTING = False

    # Security - MUST be set in environment
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Debug mode - default to False for safety
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'

    # MongoDB Configuration
    MONGO_URI = os.environ.get('MONGO_URI', 'mongodb://localhost:27017')
    MONGO_DB_NAME = os.environ.get('MONGO_DB_NAME', 'vocational_test')

    # Every remote call gives up after this many milliseconds
    REMOTE_TIMEOUT_MS = int(os.environ.get('REMOTE_TIMEOUT_MS', '5000'))

    # Local history slot
    HISTORY_FILE = os.environ.get('HISTORY_FILE', 'test_history.json')
    HISTORY_KEY = os.environ.get('HISTORY_KEY', HISTORY_KEY)

    # pt-BR short date, e.g. 19/10/2026
    RESULT_DATE_FORMAT = os.environ.get('RESULT_DATE_FORMAT', '%d/%m/%Y')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Sessions untouched for this long are dropped
    SESSION_IDLE_TIMEOUT_SECONDS = int(os.environ.get('SESSION_IDLE_TIMEOUT_SECONDS', '1800'))

    # Session configuration
    SESSION_PERMANENT = False

    # Areas of interest and the sub-fields suggested for each
    AREA_MAPPING = {
        'Áreas Técnicas e Científicas': [
            'Engenharia', 'Tecnologia da Informação', 'Física', 'Matemática'
        ],
        'Áreas Criativas': [
            'Design', 'Artes', 'Comunicação', 'Moda', 'Publicidade'
        ],
        'Áreas de Saúde e Bem-Estar': [
            'Medicina', 'Psicologia', 'Terapias', 'Enfermagem'
        ],
        'Áreas de Administração e Negócios': [
            'Gestão', 'Administração', 'Marketing', 'Finanças'
        ],
        'Áreas Humanas e Sociais': [
            'Educação', 'Trabalho Social', 'Recursos Humanos', 'Direito'
        ],
        'Áreas de Comunicação e Mídia': [
            'Jornalismo', 'Produção de Conteúdo', 'Relações Públicas'
        ],
    }

    # Configuration validation
    @classmethod
    def validate(cls):
        """Validate that all required settings are present and sane"""
        errors = []

        if not cls.SECRET_KEY:
            errors.append("SECRET_KEY is not set in environment variables")
        if not cls.MONGO_URI:
            errors.append("MONGO_URI is not set in environment variables")
        if cls.REMOTE_TIMEOUT_MS <= 0:
            errors.append("REMOTE_TIMEOUT_MS must be a positive number of milliseconds")
        if cls.SESSION_IDLE_TIMEOUT_SECONDS < 0:
            errors.append("SESSION_IDLE_TIMEOUT_SECONDS must not be negative")
        if not cls.HISTORY_KEY:
            errors.append("HISTORY_KEY must not be empty")

        if errors:
            error_msg = "\n".join(errors)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 1800


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class TestingConfig(Config):
    """Configuration used by the test suite"""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    MONGO_DB_NAME = 'vocational_test_testing'
    REMOTE_TIMEOUT_MS = 1000


CONFIG_MAP = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get the appropriate configuration class based on environment"""
    env = env or os.environ.get('FLASK_ENV', 'development')

    config_class = CONFIG_MAP.get(env, CONFIG_MAP['default'])
    config_class.validate()
    return config_class
