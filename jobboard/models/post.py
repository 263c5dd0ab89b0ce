"""
Post Model
"""

from datetime import datetime, timezone

from jobboard.extensions import db


class Post(db.Model):
    """Job posting with a single uploaded image"""
    __tablename__ = 'posts'

    id = db.Column(db.Integer, primary_key=True)
    image = db.Column(db.String(255))  # stored filename under UPLOAD_FOLDER
    title = db.Column(db.String(200))
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), nullable=False)

    def __repr__(self):
        return f'<Post {self.title}>'
