"""
Main Routes

Public post pages plus the two routes that need a logged-in user.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from flask_login import current_user

from jobboard.auth.decorators import login_required
from jobboard.errors import NotFound, PersistenceError, ValidationError
from jobboard.main import main_bp
from jobboard.services import applications, posts

logger = logging.getLogger(__name__)


@main_bp.route('/')
def index():
    """Listing of all posts, newest first, with short descriptions"""
    try:
        post_list = posts.list_posts()
    except PersistenceError:
        logger.exception('Error fetching posts')
        post_list = []
    return render_template('index.html', posts=post_list)


@main_bp.route('/about')
def about():
    return render_template('about.html')


@main_bp.route('/posts/<post_id>')
def post_detail(post_id):
    """Full post with the apply form.

    A missing post or a malformed id renders the error page with status 200.
    """
    if not post_id.isdigit():
        return render_template('error.html', error='An error occurred')
    try:
        post = posts.get_post(int(post_id))
    except NotFound as e:
        return render_template('error.html', error=e.message)
    return render_template('posts.html', post=post, user=current_user)


@main_bp.route('/apply', methods=['POST'])
def apply():
    """Submit an application.

    A missing post id goes back to the listing; a failure after that goes
    back to the post the user was looking at.
    """
    if not current_user.is_authenticated:
        flash('You need to be logged in to apply for jobs', 'danger')
        return redirect(url_for('auth.login'))

    post_id = request.form.get('post', '').strip()
    try:
        applications.apply(
            current_user,
            post_id,
            start_date=request.form.get('startDate'),
            end_date=request.form.get('endDate'),
        )
    except ValidationError as e:
        flash(e.message, 'danger')
        return redirect(url_for('main.index'))
    except PersistenceError as e:
        logger.warning('Application for post %r failed: %s', post_id, e.message)
        flash(f'Error applying for job: {e.message}', 'danger')
        return redirect(f'/posts/{post_id}')

    flash('Application submitted successfully', 'success')
    return redirect(url_for('main.index'))


@main_bp.route('/history')
@login_required
def history():
    """The logged-in user's own applications"""
    try:
        apps = applications.list_for_user(current_user.user_id)
    except PersistenceError:
        logger.exception('Error fetching application history')
        apps = []
    return render_template('history.html', applications=apps)
