"""
Main Blueprint

Public pages: post listing and detail, applying, application history.
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

from jobboard.main import routes  # noqa: E402, F401
