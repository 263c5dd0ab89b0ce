import pytest
from conftest import admin_login, location, login

from jobboard.errors import DuplicateEmail, InvalidCredentials
from jobboard.extensions import db
from jobboard.models import User
from jobboard.services import accounts


def test_register_creates_user_with_bcrypt_hash(app, client):
    r = client.post('/register', data={'name': 'Carol', 'email': 'carol@example.com', 'password': 'pw123'})
    assert r.status_code == 302
    assert location(r) == '/login'

    with app.app_context():
        user = User.query.filter_by(email='carol@example.com').one()
        assert user.name == 'Carol'
        assert user.is_admin is False
        assert user.password != 'pw123'
        assert user.password.startswith('$2b$')
        assert accounts.check_password('pw123', user.password)


def test_register_duplicate_email_keeps_original(app, client, user_id):
    with app.app_context():
        original_hash = db.session.get(User, user_id).password

    r = client.post('/register', data={'name': 'Impostor', 'email': 'alice@example.com', 'password': 'other'})
    assert r.status_code == 302
    assert location(r) == '/register'

    r = client.get('/register')
    assert 'Email already exists' in r.get_data(as_text=True)

    with app.app_context():
        users = User.query.filter_by(email='alice@example.com').all()
        assert len(users) == 1
        assert users[0].name == 'Alice'
        assert users[0].password == original_hash


def test_register_service_raises_duplicate_email(ctx, user_id):
    with pytest.raises(DuplicateEmail):
        accounts.register('alice@example.com', 'x', 'Again')


def test_register_hash_uses_configured_cost(app, ctx):
    app.config['BCRYPT_LOG_ROUNDS'] = 10
    hashed = accounts.hash_password('pw')
    assert hashed.startswith('$2b$10$')


def test_long_password_register_then_login(app, client):
    password = 'x' * 80
    r = client.post('/register', data={'name': 'Dana', 'email': 'dana@example.com', 'password': password})
    assert location(r) == '/login'

    r = login(client, 'dana@example.com', password)
    assert location(r) == '/'

    with app.app_context():
        user = User.query.filter_by(email='dana@example.com').one()
        # only the first 72 bytes count, as with any bcrypt implementation
        assert accounts.check_password('x' * 72 + 'different', user.password)
        assert not accounts.check_password('x' * 71, user.password)


def test_login_success_sets_user_principal(client, user_id):
    r = login(client)
    assert r.status_code == 302
    assert location(r) == '/'

    with client.session_transaction() as sess:
        assert sess['_user_id'] == f'user:{user_id}'


def test_login_wrong_password(client, user_id):
    r = login(client, password='wrong')
    assert r.status_code == 302
    assert location(r) == '/login'

    body = client.get('/login').get_data(as_text=True)
    assert 'Incorrect password.' in body

    with client.session_transaction() as sess:
        assert '_user_id' not in sess


def test_login_unknown_email(client):
    r = login(client, email='nobody@example.com')
    assert location(r) == '/login'
    assert 'Incorrect email.' in client.get('/login').get_data(as_text=True)


def test_authenticate_tolerates_malformed_hash(ctx, user_id):
    db.session.get(User, user_id).password = 'not-a-bcrypt-hash'
    with pytest.raises(InvalidCredentials):
        accounts.authenticate('alice@example.com', 'secret')


def test_admin_login_success(client):
    r = admin_login(client)
    assert r.status_code == 302
    assert location(r) == '/admin/add-post'

    r = client.get('/admin/add-post')
    assert r.status_code == 200
    assert 'Add post' in r.get_data(as_text=True)


def test_admin_login_failure(client):
    for username, password in [('admin', '12'), ('root', '11'), ('', '')]:
        r = admin_login(client, username, password)
        assert r.status_code == 302
        assert location(r) == '/admin/login'

        body = client.get('/admin/login').get_data(as_text=True)
        assert 'Incorrect username or password' in body

    assert location(client.get('/admin/add-post')) == '/admin/login'


def test_admin_credentials_come_from_config(app, client):
    app.config['ADMIN_USERNAME'] = 'boss'
    app.config['ADMIN_PASSWORD'] = 'letmein'

    assert location(admin_login(client)) == '/admin/login'
    assert location(admin_login(client, 'boss', 'letmein')) == '/admin/add-post'


def test_logout_is_idempotent(user_client):
    assert user_client.get('/history').status_code == 200

    for _ in range(2):
        r = user_client.get('/logout')
        assert r.status_code == 302
        assert location(r) == '/'

    assert location(user_client.get('/history')) == '/login'


def test_regular_user_cannot_reach_admin(user_client):
    r = user_client.get('/admin/users')
    assert r.status_code == 302
    assert location(r) == '/admin/login'


def test_deleted_user_session_becomes_anonymous(app, user_client, user_id):
    assert user_client.get('/history').status_code == 200

    with app.app_context():
        accounts.delete_user(user_id)

    r = user_client.get('/history')
    assert r.status_code == 302
    assert location(r) == '/login'
