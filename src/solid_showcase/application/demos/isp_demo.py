"""ISP demo entry point."""
from solid_showcase.domain.base.ports import DemoPort, OutputPort
from solid_showcase.domain.base.value_objects import Principle
from solid_showcase.domain.principles.isp import ItemList, LegacyItemList

CLICKED_POSITION = 4


class IspDemo(DemoPort):
    principle = Principle.ISP
    title = "Item and radio click listeners"
    summary = (
        "The legacy listener forces every list to stub out radio clicks. "
        "The refactored code splits item clicks and radio clicks into separate contracts."
    )

    def run_violation(self, output: OutputPort) -> None:
        LegacyItemList(output).on_item_click(CLICKED_POSITION)

    def run_refactored(self, output: OutputPort) -> None:
        ItemList(output).on_item_click(CLICKED_POSITION)
