"""
Models Package

Exports all models for easy importing.
"""

from jobboard.models.user import User
from jobboard.models.post import Post
from jobboard.models.application import Application

__all__ = ['User', 'Post', 'Application']
