import pytest

from services import hotels_service
from services.errors import NotFoundError, PaymentRequiredError
from tests import factories
from tests.factories import TicketStatus


def test_missing_ticket_raises_not_found(user):
    factories.create_enrollment_with_address(user)

    with pytest.raises(NotFoundError):
        hotels_service.validate_hotel_access(user.id)


def test_reserved_ticket_is_checked_before_ticket_type(user):
    enrollment = factories.create_enrollment_with_address(user)
    ticket_type = factories.create_ticket_type(is_remote=True, includes_hotel=False)
    factories.create_ticket(enrollment.id, ticket_type.id, TicketStatus.RESERVED)

    with pytest.raises(PaymentRequiredError) as excinfo:
        hotels_service.validate_hotel_access(user.id)

    assert excinfo.value.name == "PaymentRequired"


@pytest.mark.parametrize("is_remote,includes_hotel", [(True, True), (True, False), (False, False)])
def test_ineligible_ticket_type(user, is_remote, includes_hotel):
    enrollment = factories.create_enrollment_with_address(user)
    ticket_type = factories.create_ticket_type(is_remote=is_remote, includes_hotel=includes_hotel)
    factories.create_ticket(enrollment.id, ticket_type.id, TicketStatus.PAID)

    with pytest.raises(PaymentRequiredError):
        hotels_service.validate_hotel_access(user.id)


def test_eligible_user_passes(eligible_user):
    assert hotels_service.validate_hotel_access(eligible_user.id) is None


def test_other_users_ticket_does_not_count(eligible_user):
    other = factories.create_user()
    factories.create_enrollment_with_address(other)

    with pytest.raises(NotFoundError):
        hotels_service.validate_hotel_access(other.id)


def test_get_hotels_returns_all(eligible_user):
    factories.create_hotel()
    factories.create_hotel()

    assert len(hotels_service.get_hotels(eligible_user.id)) == 2


def test_get_hotel_rooms_unknown_id(eligible_user):
    with pytest.raises(NotFoundError):
        hotels_service.get_hotel_rooms(42, eligible_user.id)


def test_get_hotel_rooms_without_id(eligible_user):
    factories.create_hotel()

    with pytest.raises(NotFoundError):
        hotels_service.get_hotel_rooms(None, eligible_user.id)


def test_get_hotel_rooms_loads_rooms(eligible_user):
    hotel = factories.create_hotel()
    factories.create_room(hotel.id)

    result = hotels_service.get_hotel_rooms(hotel.id, eligible_user.id)

    assert result.id == hotel.id
    assert len(result.rooms) == 1
