"""
Pytest configuration and shared fixtures
"""
import pytest

from app import create_app, db
from tests import factories


@pytest.fixture(scope="function")
def app():
    """Application bound to a fresh in-memory database"""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    return factories.create_user()


@pytest.fixture
def auth_headers(user):
    """Bearer header for a user with a live session"""
    token = factories.generate_valid_token(user)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def eligible_user(user):
    """User with an enrollment and a paid, in-person ticket that includes hotel"""
    enrollment = factories.create_enrollment_with_address(user)
    ticket_type = factories.create_ticket_type(is_remote=False, includes_hotel=True)
    factories.create_ticket(enrollment.id, ticket_type.id, factories.TicketStatus.PAID)
    return user
