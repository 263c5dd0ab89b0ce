"""
Configuration settings for the Job Board application
"""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'jobboard.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Uploaded post images are served from the static folder
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or \
        os.path.join(basedir, 'jobboard', 'static', 'image')
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024

    # bcrypt cost factor for user passwords
    BCRYPT_LOG_ROUNDS = int(os.environ.get('BCRYPT_LOG_ROUNDS') or 10)

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Admin Credentials (session-based, no backing user record)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or '11'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    BCRYPT_LOG_ROUNDS = 4
