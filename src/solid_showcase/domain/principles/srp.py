"""Single Responsibility Principle - a list adapter binding users to views.

The legacy adapter both formats the mobile numbers and renders them. The
refactored adapter only renders; formatting happens when the User is built.
"""
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from solid_showcase.domain.base.exceptions import ValidationError
from solid_showcase.domain.base.ports import OutputPort

MOBILE_SEPARATOR = ", "


class LegacyUser(BaseModel):
    """User record with the raw list of mobile numbers."""
    model_config = ConfigDict(frozen=True)

    name: str
    mobiles: List[str]


class User(BaseModel):
    """User record with mobile numbers already joined for display."""
    model_config = ConfigDict(frozen=True)

    name: str
    mobile: str

    @classmethod
    def from_mobiles(cls, name: str, mobiles: Sequence[str]) -> "User":
        return cls(name=name, mobile=MOBILE_SEPARATOR.join(mobiles))


def _select(users: Sequence, position: int):
    if not 0 <= position < len(users):
        raise ValidationError(
            f"Position {position} is out of range",
            {"position": position, "size": len(users)},
        )
    return users[position]


class LegacyUserAdapter:
    """Adapter that owns both data formatting and view binding."""

    def __init__(self, users: Sequence[LegacyUser], output: OutputPort):
        self._users = list(users)
        self._output = output

    def bind(self, position: int) -> None:
        user = _select(self._users, position)
        self._output.write_line(f"Name has been set as {user.name} to TextView")
        # Formatting the numbers is not the adapter's job
        mobile = MOBILE_SEPARATOR.join(user.mobiles)
        self._output.write_line(f"Mobile number has been set as {mobile} to TextView")


class UserAdapter:
    """Adapter that only binds already prepared fields to views."""

    def __init__(self, users: Sequence[User], output: OutputPort):
        self._users = list(users)
        self._output = output

    def bind(self, position: int) -> None:
        user = _select(self._users, position)
        self._output.write_line(f"Name has been set as {user.name} to TextView")
        self._output.write_line(f"Mobile number has been set as {user.mobile} to TextView")
