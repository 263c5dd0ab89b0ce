"""
Upload Handling

Post images are written under UPLOAD_FOLDER with a generated name built
from the current time and a random suffix. Names are not checked against
files already on disk.
"""

import logging
import random
import re
import time
from pathlib import Path

from flask import current_app

from jobboard.errors import ValidationError

logger = logging.getLogger(__name__)

EXTENSION_RE = re.compile(r'^\.[A-Za-z0-9]+$')


def _ensure_base() -> Path:
    base = Path(current_app.config['UPLOAD_FOLDER'])
    base.mkdir(parents=True, exist_ok=True)
    return base


def generate_filename(original: str) -> str:
    """Return ``<epoch ms>-<random>`` plus the original file's extension."""
    unique_name = f'{int(time.time() * 1000)}-{random.randint(0, 10 ** 9)}'
    suffix = Path(original or '').suffix
    if not EXTENSION_RE.match(suffix):
        suffix = ''
    return unique_name + suffix


def save_image(file_storage) -> str:
    """Save an uploaded image and return the stored filename.

    Raises:
        ValidationError: no file was attached to the request
    """
    if file_storage is None or not file_storage.filename:
        raise ValidationError('No file uploaded')

    filename = generate_filename(file_storage.filename)
    dest = _ensure_base() / filename
    file_storage.save(dest)
    logger.info('Stored upload %s as %s', file_storage.filename, filename)
    return filename
