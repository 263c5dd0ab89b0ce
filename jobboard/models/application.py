"""
Application Model

user_id and post_id are plain integer columns with no database-level
foreign key. Deleting a User or Post leaves the Application rows in place
on every backend; the relation then resolves to None.
"""

from datetime import datetime, timezone

from jobboard.extensions import db


class Application(db.Model):
    """A user's application to a post"""
    __tablename__ = 'applications'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    post_id = db.Column(db.Integer, nullable=False, index=True)
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    status = db.Column(db.String(80), default='Pending', nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    user = db.relationship('User', primaryjoin='foreign(Application.user_id) == User.id')
    post = db.relationship('Post', primaryjoin='foreign(Application.post_id) == Post.id')

    def __repr__(self):
        return f'<Application User:{self.user_id} Post:{self.post_id} {self.status}>'
