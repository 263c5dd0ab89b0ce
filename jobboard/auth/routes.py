"""
Auth Routes

User authentication routes using Flask-Login.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_user, logout_user

from jobboard.auth import auth_bp
from jobboard.auth.principals import principal_for
from jobboard.errors import DuplicateEmail, InvalidCredentials, PersistenceError, ValidationError
from jobboard.services import accounts

logger = logging.getLogger(__name__)


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if request.method == 'POST':
        try:
            accounts.register(
                email=request.form.get('email', ''),
                password=request.form.get('password', ''),
                name=request.form.get('name', ''),
            )
        except DuplicateEmail:
            flash('Email already exists', 'danger')
            return redirect(url_for('auth.register'))
        except (ValidationError, PersistenceError) as e:
            flash(e.message, 'danger')
            return redirect(url_for('auth.register'))

        flash('Registration successful! Please login.', 'success')
        return redirect(url_for('auth.login'))

    return render_template('register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'POST':
        try:
            user = accounts.authenticate(
                request.form.get('email', ''),
                request.form.get('password', ''),
            )
        except InvalidCredentials as e:
            logger.info('Failed login for %r', request.form.get('email', ''))
            flash(e.message, 'danger')
            return redirect(url_for('auth.login'))

        login_user(principal_for(user))
        return redirect(url_for('main.index'))

    return render_template('login.html')


@auth_bp.route('/logout')
def logout():
    """Log out whoever is logged in; safe to call when nobody is."""
    logout_user()
    flash('You have been logged out successfully', 'success')
    return redirect(url_for('main.index'))
