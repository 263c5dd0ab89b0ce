import io
from urllib.parse import urlparse

import pytest

from jobboard import create_app
from jobboard.config import TestConfig
from jobboard.extensions import db
from jobboard.models import Post
from jobboard.services import accounts


@pytest.fixture()
def app(tmp_path):
    class Config(TestConfig):
        UPLOAD_FOLDER = str(tmp_path / 'uploads')

    return create_app(Config)


@pytest.fixture()
def ctx(app):
    """App context for tests that call services or query models directly.

    Tests driving the client must not use this: requests would share its
    context and the logged-in principal cached on `g`.
    """
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def upload_dir(app):
    return app.config['UPLOAD_FOLDER']


def create_user(app, email, password, name):
    with app.app_context():
        return accounts.register(email, password, name).id


def create_post(app, title='Backend developer',
                description='Build and run the Flask services behind the job board.',
                image='1700000000000-42.png', created_at=None):
    with app.app_context():
        p = Post(image=image, title=title, description=description)
        if created_at is not None:
            p.created_at = created_at
        db.session.add(p)
        db.session.commit()
        return p.id


@pytest.fixture()
def user_id(app):
    return create_user(app, 'alice@example.com', 'secret', 'Alice')


@pytest.fixture()
def other_user_id(app):
    return create_user(app, 'bob@example.com', 'hunter2', 'Bob')


@pytest.fixture()
def post_id(app):
    return create_post(app)


def login(client, email='alice@example.com', password='secret'):
    return client.post('/login', data={'email': email, 'password': password})


def admin_login(client, username='admin', password='11'):
    return client.post('/admin/login', data={'username': username, 'password': password})


def location(response):
    """Path part of a redirect's Location header."""
    return urlparse(response.headers['Location']).path


def image_upload(name='photo.png', content=b'\x89PNG fake image'):
    return (io.BytesIO(content), name)


@pytest.fixture()
def user_client(client, user_id):
    login(client)
    return client


@pytest.fixture()
def admin_client(client):
    admin_login(client)
    return client
