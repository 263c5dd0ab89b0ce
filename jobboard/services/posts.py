"""
Post Services

Listing, lookup and admin CRUD for job posts.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from jobboard.errors import NotFound, PersistenceError
from jobboard.extensions import db
from jobboard.models import Post
from jobboard.services.uploads import save_image

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 100


def excerpt(text, length=EXCERPT_LENGTH):
    """Cut text to ``length`` characters plus an ellipsis when longer."""
    text = text or ''
    if len(text) > length:
        return text[:length] + '...'
    return text


def summarize(post):
    """Listing view of a post with its description shortened."""
    return {
        'id': post.id,
        'image': post.image,
        'title': post.title,
        'description': excerpt(post.description),
        'created_at': post.created_at,
        'updated_at': post.updated_at,
    }


def list_posts(truncate=True):
    """Return all posts, newest first.

    With ``truncate`` the posts come back as summary dicts for the public
    listing; without it the model instances are returned untouched.
    """
    try:
        posts = Post.query.order_by(Post.created_at.desc(), Post.id.desc()).all()
    except SQLAlchemyError as e:
        raise PersistenceError(str(e))
    if not truncate:
        return posts
    return [summarize(p) for p in posts]


def get_post(post_id):
    post = db.session.get(Post, post_id)
    if post is None:
        raise NotFound('Post not found')
    return post


def create_post(title, description, image_file):
    """Store the uploaded image, then the post that refers to it.

    Raises:
        ValidationError: no image was attached
        PersistenceError: the post could not be saved (the image stays on disk)
    """
    filename = save_image(image_file)
    post = Post(image=filename, title=title, description=description)
    try:
        db.session.add(post)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error saving post')
        raise PersistenceError(str(e))
    logger.info('Post %s created', post.id)
    return post


def update_post(post_id, title, description):
    """Change title and description. The image is left as it is."""
    post = get_post(post_id)
    post.title = title
    post.description = description
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError(str(e))
    logger.info('Post %s updated', post_id)
    return post


def delete_post(post_id):
    """Remove the post row. The stored image file is not deleted."""
    post = get_post(post_id)
    try:
        db.session.delete(post)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise PersistenceError(str(e))
    logger.info('Post %s deleted', post_id)
