"""
Services Package

Business operations behind the routes. Each module raises the errors
defined in jobboard.errors and leaves HTTP concerns to the blueprints.
"""

from jobboard.services import accounts, applications, posts, uploads

__all__ = ['accounts', 'applications', 'posts', 'uploads']
