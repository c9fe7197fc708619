import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-change-in-production')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///voyage.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Shop money settings; unset means the "${{amount}}" fallback.
    MONEY_FORMAT = os.environ.get('MONEY_FORMAT') or None
    MONEY_WITH_CURRENCY_FORMAT = os.environ.get('MONEY_WITH_CURRENCY_FORMAT') or None

class DevelopmentConfig(Config):
    DEBUG = True

class ProductionConfig(Config):
    DEBUG = False

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SECRET_KEY = 'test-secret'

config_map = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}
