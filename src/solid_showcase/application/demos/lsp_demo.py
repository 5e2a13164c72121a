"""LSP demo entry point."""
from solid_showcase.domain.base.ports import DemoPort, OutputPort
from solid_showcase.domain.base.value_objects import Principle
from solid_showcase.domain.principles.lsp import ClickHandler, LegacyClickHandler, LegacyRadioButton, RadioButton


class LspDemo(DemoPort):
    principle = Principle.LSP
    title = "Click listener"
    summary = (
        "The legacy handler type-checks for radio buttons to enable them first. "
        "The refactored RadioButton enables itself, so any ClickListener can be substituted."
    )

    def run_violation(self, output: OutputPort) -> None:
        LegacyClickHandler().perform_click(LegacyRadioButton(output))

    def run_refactored(self, output: OutputPort) -> None:
        ClickHandler().perform_click(RadioButton(output))
