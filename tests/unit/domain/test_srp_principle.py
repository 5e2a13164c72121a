"""Tests for the SRP user adapter types."""
import pydantic
import pytest

from solid_showcase.domain.base.exceptions import ValidationError
from solid_showcase.domain.principles.srp import LegacyUser, LegacyUserAdapter, User, UserAdapter

EXPECTED_LINES = [
    "Name has been set as Android User to TextView",
    "Mobile number has been set as 987654321, 9999999999 to TextView",
]


class TestUser:
    def test_from_mobiles_joins_numbers(self):
        user = User.from_mobiles("Android User", ["987654321", "9999999999"])
        assert user.mobile == "987654321, 9999999999"

    def test_single_mobile_is_not_decorated(self):
        assert User.from_mobiles("A", ["123"]).mobile == "123"

    def test_user_is_immutable(self):
        user = User(name="Android User", mobile="987654321")
        with pytest.raises(pydantic.ValidationError):
            user.name = "Other"


class TestUserAdapter:
    def test_bind_writes_prepared_fields(self, recording_output):
        users = [User(name="Android User", mobile="987654321, 9999999999")]
        UserAdapter(users, recording_output).bind(0)
        assert recording_output.lines == EXPECTED_LINES

    def test_bind_out_of_range_raises(self, recording_output):
        users = [User(name="Android User", mobile="987654321")]
        with pytest.raises(ValidationError, match="out of range"):
            UserAdapter(users, recording_output).bind(1)
        assert recording_output.lines == []


class TestLegacyUserAdapter:
    def test_bind_formats_and_writes(self, recording_output):
        users = [LegacyUser(name="Android User", mobiles=["987654321", "9999999999"])]
        LegacyUserAdapter(users, recording_output).bind(0)
        assert recording_output.lines == EXPECTED_LINES

    def test_negative_position_raises(self, recording_output):
        users = [LegacyUser(name="Android User", mobiles=["987654321"])]
        with pytest.raises(ValidationError) as exc_info:
            LegacyUserAdapter(users, recording_output).bind(-1)
        assert exc_info.value.details == {"position": -1, "size": 1}
