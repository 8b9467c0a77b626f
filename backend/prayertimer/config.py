import os
from dotenv import load_dotenv

# Load .env file
dotenv_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
if os.path.exists(dotenv_path):
    load_dotenv(dotenv_path)
else:
    print("Warning: .env file not found. Using defaults or environment variables.")


def _env_bool(name, default="false"):
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a_default_fallback_secret_key_for_development_only'
    LOG_LEVEL = "INFO"

    # Sentry Configuration
    SENTRY_DSN = os.environ.get('SENTRY_DSN')

    # Rate limiter storage; in-memory unless a shared backend is configured.
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')

    # Default Timer Preferences
    # Used for any setting a request does not supply.
    DEFAULT_TIME_ZONE = os.environ.get('DEFAULT_TIME_ZONE', "Asia/Kolkata")
    DEFAULT_STOPWATCH_MINUTES = int(os.environ.get('DEFAULT_STOPWATCH_MINUTES', 15))
    DEFAULT_PRE_ADHAN_MINUTES = int(os.environ.get('DEFAULT_PRE_ADHAN_MINUTES', 30))
    DEFAULT_IQAMA_TIMER_ENABLED = _env_bool('DEFAULT_IQAMA_TIMER_ENABLED', "true")
    DEFAULT_SUNRISE_AFTER_ISHA = _env_bool('DEFAULT_SUNRISE_AFTER_ISHA', "false")

    # Flask-Smorest API documentation configuration
    API_TITLE = "NoorTime Prayer Timer API"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.2"
    OPENAPI_URL_PREFIX = "/api/docs"
    OPENAPI_SWAGGER_UI_PATH = "/swagger-ui"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

class DevelopmentConfig(Config):
    FLASK_ENV = 'development'
    DEBUG = True
    LOG_LEVEL = "DEBUG"

class ProductionConfig(Config):
    FLASK_ENV = 'production'
    DEBUG = False

class TestingConfig(Config):
    TESTING = True
    RATELIMIT_ENABLED = False # Disable rate limiting for tests
    SECRET_KEY = 'test-secret-key'
    DEFAULT_TIME_ZONE = "UTC"
    DEFAULT_STOPWATCH_MINUTES = 0
    DEFAULT_PRE_ADHAN_MINUTES = 30
    DEFAULT_IQAMA_TIMER_ENABLED = False
    DEFAULT_SUNRISE_AFTER_ISHA = False

config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
