import os
from datetime import timedelta


def _env_flag(name, default='false'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Database Settings (contact message log)
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Request Settings
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB, the contact form is the only body we accept
    JSON_AS_ASCII = False
    # Number of reverse proxies in front of the app whose X-Forwarded-For is trusted
    PROXY_FIX_X_FOR = int(os.environ.get('PROXY_FIX_X_FOR', '0'))

    # Mail Relay Settings
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', '587'))
    SMTP_USER = os.environ.get('SMTP_USER') or os.environ.get('EMAIL_USER')
    SMTP_PASS = os.environ.get('SMTP_PASS') or os.environ.get('EMAIL_PASS')
    SMTP_TIMEOUT = int(os.environ.get('SMTP_TIMEOUT', '15'))
    FROM_EMAIL = os.environ.get('FROM_EMAIL', 'noreply@alexchen.dev')
    TO_EMAIL = os.environ.get('TO_EMAIL', 'alex.chen@example.com')
    MAIL_SUPPRESS_SEND = _env_flag('MAIL_SUPPRESS_SEND')

    # Owner Notification Settings
    OWNER_TELEGRAM_BOT_TOKEN = os.environ.get('OWNER_TELEGRAM_BOT_TOKEN')
    OWNER_TELEGRAM_CHAT_ID = os.environ.get('OWNER_TELEGRAM_CHAT_ID')

    # Contact Form Settings
    CONTACT_MESSAGE_MIN_LENGTH = int(os.environ.get('CONTACT_MESSAGE_MIN_LENGTH', '10'))
    RATE_LIMIT_MAX_REQUESTS = int(os.environ.get('RATE_LIMIT_MAX_REQUESTS', '5'))
    RATE_LIMIT_WINDOW = int(os.environ.get('RATE_LIMIT_WINDOW', '60'))

    # Resume
    RESUME_PATH = os.environ.get('RESUME_PATH', 'static/resume.pdf')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # In-memory SQLite runs on a StaticPool, which rejects pool settings.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SMTP_HOST = 'smtp.test.local'
    SMTP_PORT = 587
    SMTP_USER = 'relay@alexchen.dev'
    SMTP_PASS = 'relay-password'
    FROM_EMAIL = 'noreply@alexchen.dev'
    TO_EMAIL = 'owner@alexchen.dev'
    MAIL_SUPPRESS_SEND = False
    OWNER_TELEGRAM_BOT_TOKEN = None
    OWNER_TELEGRAM_CHAT_ID = None
    CONTACT_MESSAGE_MIN_LENGTH = 10
    RATE_LIMIT_MAX_REQUESTS = 5
    RATE_LIMIT_WINDOW = 60
    PROXY_FIX_X_FOR = 0


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
