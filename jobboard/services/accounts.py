"""
Account Services

Registration, credential checks and admin user management.
"""

import hmac
import logging

import bcrypt
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from jobboard.errors import DuplicateEmail, InvalidCredentials, NotFound, PersistenceError, ValidationError
from jobboard.extensions import db
from jobboard.models import User

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password):
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]


def hash_password(password):
    """Hash a password with bcrypt at the configured cost factor."""
    rounds = current_app.config.get('BCRYPT_LOG_ROUNDS', 10)
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def check_password(password, hashed):
    """Compare a plain password with a stored bcrypt hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode('utf-8'))
    except ValueError:
        logger.warning('Stored password hash could not be parsed')
        return False


def register(email, password, name):
    """Create a new user.

    Raises:
        ValidationError: a field is blank
        DuplicateEmail: a user with this email already exists
        PersistenceError: the insert failed for another reason
    """
    email = (email or '').strip()
    name = (name or '').strip()
    if not email or not password or not name:
        raise ValidationError('Name, email and password are required')

    if User.query.filter_by(email=email).first():
        raise DuplicateEmail()

    user = User(email=email, password=hash_password(password), name=name)
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        # lost a race with a concurrent registration
        db.session.rollback()
        raise DuplicateEmail()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Registration error')
        raise PersistenceError(str(e))

    logger.info('Registered user %s', user.id)
    return user


def authenticate(email, password):
    """Return the User matching the credentials or raise InvalidCredentials."""
    user = User.query.filter_by(email=(email or '').strip()).first()
    if user is None:
        raise InvalidCredentials('Incorrect email.')
    if not check_password(password or '', user.password):
        raise InvalidCredentials('Incorrect password.')
    return user


def authenticate_admin(username, password):
    """Check the configured admin credential pair."""
    expected_username = current_app.config['ADMIN_USERNAME']
    expected_password = current_app.config['ADMIN_PASSWORD']

    username_ok = hmac.compare_digest((username or '').encode('utf-8'), expected_username.encode('utf-8'))
    password_ok = hmac.compare_digest((password or '').encode('utf-8'), expected_password.encode('utf-8'))
    if not (username_ok and password_ok):
        raise InvalidCredentials('Incorrect username or password')
    return expected_username


def list_users():
    try:
        return User.query.order_by(User.created_at.desc(), User.id.desc()).all()
    except SQLAlchemyError as e:
        raise PersistenceError(str(e))


def delete_user(user_id):
    """Delete a user. Their applications are kept and keep pointing at the old id."""
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound('User not found')
    try:
        db.session.delete(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError(str(e))
    logger.info('User %s deleted', user_id)


def create_admin_user(email, name, password):
    """Create a user flagged is_admin, or promote the existing one."""
    user = User.query.filter_by(email=email).first()
    if user is None:
        user = register(email, password, name)
        created = True
    else:
        created = False
    user.is_admin = True
    db.session.commit()
    return user, created
