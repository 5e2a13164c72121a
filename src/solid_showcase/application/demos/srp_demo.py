"""SRP demo entry point."""
from solid_showcase.domain.base.ports import DemoPort, OutputPort
from solid_showcase.domain.base.value_objects import Principle
from solid_showcase.domain.principles.srp import LegacyUser, LegacyUserAdapter, User, UserAdapter

USER_NAME = "Android User"
USER_MOBILES = ["987654321", "9999999999"]


class SrpDemo(DemoPort):
    principle = Principle.SRP
    title = "User adapter"
    summary = (
        "The legacy adapter formats mobile numbers and binds views. "
        "The refactored adapter only binds; the User arrives display-ready."
    )

    def run_violation(self, output: OutputPort) -> None:
        users = [LegacyUser(name=USER_NAME, mobiles=USER_MOBILES)]
        LegacyUserAdapter(users, output).bind(0)

    def run_refactored(self, output: OutputPort) -> None:
        users = [User.from_mobiles(USER_NAME, USER_MOBILES)]
        UserAdapter(users, output).bind(0)
