"""
Admin Routes

Admin login with the configured credential pair, post management,
application review and user management.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from flask_login import current_user, login_user

from jobboard.admin import admin_bp
from jobboard.auth.decorators import admin_required
from jobboard.auth.principals import AdminPrincipal
from jobboard.errors import InvalidCredentials, NotFound, PersistenceError, ValidationError
from jobboard.services import accounts, applications, posts

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Admin Authentication
# -----------------------------------------------------------------------------

@admin_bp.route('/admin/login', methods=['GET', 'POST'])
def admin_login():
    """Dedicated admin login page, checked against the configured credentials."""
    if request.method == 'POST':
        try:
            username = accounts.authenticate_admin(
                request.form.get('username', '').strip(),
                request.form.get('password', ''),
            )
        except InvalidCredentials as e:
            logger.warning('Failed admin login from %s', request.remote_addr)
            flash(e.message, 'danger')
            return redirect(url_for('admin.admin_login'))

        login_user(AdminPrincipal(username=username))
        return redirect(url_for('admin.add_post'))

    if isinstance(current_user._get_current_object(), AdminPrincipal):
        return redirect(url_for('admin.add_post'))
    return render_template('admin/login.html')


# -----------------------------------------------------------------------------
# Posts
# -----------------------------------------------------------------------------

@admin_bp.route('/admin/', methods=['GET'])
@admin_bp.route('/admin/add-post', methods=['GET', 'POST'])
@admin_required
def add_post():
    """Create a post with its image.

    Failures answer with a plain text body rather than a page.
    """
    if request.method == 'POST':
        try:
            posts.create_post(
                title=request.form.get('title', ''),
                description=request.form.get('description', ''),
                image_file=request.files.get('image'),
            )
        except ValidationError as e:
            logger.error('No file uploaded')
            return e.message, 200, {'Content-Type': 'text/plain; charset=utf-8'}
        except PersistenceError:
            return 'Error saving post', 200, {'Content-Type': 'text/plain; charset=utf-8'}

        flash('Post created successfully.', 'success')

    return render_template('admin/add_post.html')


@admin_bp.route('/admin/my-posts')
@admin_required
def my_posts():
    try:
        post_list = posts.list_posts(truncate=False)
    except PersistenceError:
        logger.exception('Error fetching posts')
        post_list = []
    return render_template('admin/my_posts.html', posts=post_list)


@admin_bp.route('/delete-post/<int:post_id>', methods=['POST'])
@admin_required
def delete_post(post_id):
    """Delete a post. Its image file is left in the upload folder."""
    try:
        posts.delete_post(post_id)
        flash('Post deleted successfully.', 'success')
    except (NotFound, PersistenceError) as e:
        logger.error('Error deleting post %s: %s', post_id, e.message)
        flash(f'Could not delete post: {e.message}', 'danger')
    return redirect(url_for('admin.my_posts'))


@admin_bp.route('/admin/update-post/<int:post_id>', methods=['GET'])
@admin_bp.route('/update-post/<int:post_id>', methods=['GET', 'POST'])
@admin_required
def update_post(post_id):
    """Edit title and description of a post."""
    if request.method == 'POST':
        try:
            posts.update_post(
                post_id,
                title=request.form.get('title', ''),
                description=request.form.get('description', ''),
            )
            flash('Post updated successfully.', 'success')
        except (NotFound, PersistenceError) as e:
            logger.error('Error updating post %s: %s', post_id, e.message)
            flash(f'Could not update post: {e.message}', 'danger')
        return redirect(url_for('admin.my_posts'))

    try:
        post = posts.get_post(post_id)
    except NotFound as e:
        flash(e.message, 'danger')
        return redirect(url_for('admin.my_posts'))
    return render_template('admin/update_post.html', post=post)


# -----------------------------------------------------------------------------
# Applications
# -----------------------------------------------------------------------------

@admin_bp.route('/admin/applications')
@admin_required
def list_applications():
    try:
        apps = applications.list_for_admin()
    except PersistenceError:
        logger.exception('Error fetching applications')
        apps = []
    return render_template('admin/applications.html', applications=apps)


@admin_bp.route('/admin/application/<int:application_id>/status', methods=['POST'])
@admin_required
def update_application_status(application_id):
    try:
        applications.update_status(application_id, request.form.get('status'))
        flash('Application status updated.', 'success')
    except (ValidationError, NotFound, PersistenceError) as e:
        logger.error('Error updating application %s status: %s', application_id, e.message)
        flash(f'Could not update application: {e.message}', 'danger')
    return redirect(url_for('admin.list_applications'))


@admin_bp.route('/admin/application/<int:application_id>/delete', methods=['POST'])
@admin_required
def delete_application(application_id):
    try:
        applications.delete_application(application_id)
        flash('Application deleted.', 'success')
    except (NotFound, PersistenceError) as e:
        logger.error('Error deleting application %s: %s', application_id, e.message)
        flash(f'Could not delete application: {e.message}', 'danger')
    return redirect(url_for('admin.list_applications'))


# -----------------------------------------------------------------------------
# Users
# -----------------------------------------------------------------------------

@admin_bp.route('/admin/users')
@admin_required
def list_users():
    try:
        users = accounts.list_users()
    except PersistenceError:
        logger.exception('Error fetching users')
        return redirect(url_for('admin.add_post'))
    return render_template('admin/users.html', users=users)


@admin_bp.route('/admin/users/delete/<int:user_id>', methods=['POST'])
@admin_required
def delete_user(user_id):
    """Delete a user. Applications they made stay in place."""
    try:
        accounts.delete_user(user_id)
        flash('User deleted successfully.', 'success')
    except (NotFound, PersistenceError) as e:
        logger.error('Error deleting user %s: %s', user_id, e.message)
        flash(f'Could not delete user: {e.message}', 'danger')
    return redirect(url_for('admin.list_users'))
