"""
Route Gates

Both gates redirect on failure; neither returns an error status.
"""

from functools import wraps

from flask import flash, redirect, url_for
from flask_login import current_user

from jobboard.auth.principals import AdminPrincipal, UserPrincipal


def login_required(f):
    """Decorator to ensure the request carries any logged-in principal."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not isinstance(current_user._get_current_object(), (UserPrincipal, AdminPrincipal)):
            flash('You need to be logged in to access this page', 'danger')
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return wrapper


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.

    Regular users are sent to the admin login just like anonymous visitors.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not isinstance(current_user._get_current_object(), AdminPrincipal):
            return redirect(url_for('admin.admin_login'))
        return f(*args, **kwargs)
    return wrapper
