"""
Session Principals

The identity attached to a session is either a UserPrincipal (a registered
user, re-validated against the database on every request) or an
AdminPrincipal (rebuilt from the session alone, never looked up).

Flask-Login stores ``get_id()`` in the session, so the tag travels in the id:

    user:<user id>
    admin:<user id or empty>:<username>
"""

from flask_login import UserMixin

from jobboard.extensions import db

USER_TAG = 'user'
ADMIN_TAG = 'admin'


class UserPrincipal(UserMixin):
    """A logged-in regular user."""

    is_admin = False

    def __init__(self, user_id, email, name):
        self.user_id = user_id
        self.email = email
        self.name = name

    def get_id(self):
        return f'{USER_TAG}:{self.user_id}'

    @property
    def display_name(self):
        return self.name

    def __repr__(self):
        return f'<UserPrincipal {self.user_id}>'


class AdminPrincipal(UserMixin):
    """A logged-in administrator.

    ``user_id`` is None for the configured admin account and set when a
    User flagged ``is_admin`` logs in through the regular form.
    """

    is_admin = True

    def __init__(self, username, user_id=None):
        self.username = username
        self.user_id = user_id

    def get_id(self):
        user_id = '' if self.user_id is None else self.user_id
        return f'{ADMIN_TAG}:{user_id}:{self.username}'

    @property
    def display_name(self):
        return self.username

    def __repr__(self):
        return f'<AdminPrincipal {self.username}>'


def principal_for(user):
    """Build the principal a stored User logs in as."""
    if user.is_admin:
        return AdminPrincipal(username=user.email, user_id=user.id)
    return UserPrincipal(user_id=user.id, email=user.email, name=user.name)


def load_principal(session_id):
    """Rebuild the principal from the id Flask-Login kept in the session.

    Returns None for unknown tags, malformed ids and users that no longer
    exist, which Flask-Login treats as an anonymous request.
    """
    from jobboard.models import User

    tag, _, rest = (session_id or '').partition(':')

    if tag == ADMIN_TAG:
        user_id, sep, username = rest.partition(':')
        if not sep or not username:
            return None
        return AdminPrincipal(username=username, user_id=int(user_id) if user_id.isdigit() else None)

    if tag == USER_TAG:
        if not rest.isdigit():
            return None
        user = db.session.get(User, int(rest))
        if user is None:
            return None
        return UserPrincipal(user_id=user.id, email=user.email, name=user.name)

    return None
