"""
Admin Blueprint

The admin panel lives mostly under /admin; the post delete and update
endpoints sit at the top level, so the blueprint has no url prefix.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from jobboard.admin import routes  # noqa: E402, F401
