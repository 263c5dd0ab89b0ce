"""
Flask Extensions

The admin account is configured rather than stored, so both regular users
and the admin go through the same login manager with different principals.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for users and the configured admin
login_manager = LoginManager()
