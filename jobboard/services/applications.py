"""
Application Services

Users apply to posts; the admin reviews, relabels and deletes applications.
Status is free text and is never checked against a fixed set.
"""

import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from jobboard.errors import NotFound, PersistenceError, ValidationError
from jobboard.extensions import db
from jobboard.models import Application, Post, User

logger = logging.getLogger(__name__)


def _parse_date(value):
    """Parse an ISO ``YYYY-MM-DD`` form value; blank means no date."""
    value = (value or '').strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise PersistenceError(f'Invalid date "{value}"')


def apply(principal, post_id, start_date=None, end_date=None):
    """Create an application for the principal's user.

    Raises:
        ValidationError: no post id was submitted
        PersistenceError: the user or post is missing, a date is malformed,
            or the insert failed
    """
    if not post_id:
        raise ValidationError('No post ID found')

    user_id = getattr(principal, 'user_id', None)
    if user_id is None:
        raise PersistenceError('No user is attached to this session')

    try:
        post_pk = int(post_id)
    except (TypeError, ValueError):
        raise PersistenceError(f'Invalid post id "{post_id}"')

    if db.session.get(User, user_id) is None:
        raise PersistenceError('User not found')
    if db.session.get(Post, post_pk) is None:
        raise PersistenceError('Post not found')

    application = Application(
        user_id=user_id,
        post_id=post_pk,
        start_date=_parse_date(start_date),
        end_date=_parse_date(end_date),
    )
    try:
        db.session.add(application)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error saving application')
        raise PersistenceError(str(e))

    logger.info('User %s applied to post %s', user_id, post_pk)
    return application


def list_for_admin():
    """All applications with their user and post loaded."""
    try:
        return (Application.query
                .options(joinedload(Application.user), joinedload(Application.post))
                .order_by(Application.id.desc())
                .all())
    except SQLAlchemyError as e:
        raise PersistenceError(str(e))


def list_for_user(user_id):
    """A user's own applications with their post loaded."""
    if user_id is None:
        return []
    try:
        return (Application.query
                .options(joinedload(Application.post))
                .filter_by(user_id=user_id)
                .order_by(Application.id)
                .all())
    except SQLAlchemyError as e:
        raise PersistenceError(str(e))


def get_application(application_id):
    application = db.session.get(Application, application_id)
    if application is None:
        raise NotFound('Application not found')
    return application


def update_status(application_id, status):
    """Overwrite the status with whatever text the admin submitted."""
    if status is None:
        raise ValidationError('No status given')
    application = get_application(application_id)
    application.status = status
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError(str(e))
    logger.info('Application %s status set to %r', application_id, status)
    return application


def delete_application(application_id):
    application = get_application(application_id)
    try:
        db.session.delete(application)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError(str(e))
    logger.info('Application %s deleted', application_id)
