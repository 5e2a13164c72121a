"""Liskov Substitution Principle - click listeners on buttons."""
from abc import ABC, abstractmethod

from solid_showcase.domain.base.ports import OutputPort


class ClickListener(ABC):
    """Anything that can be clicked."""

    @abstractmethod
    def on_click(self) -> None:
        pass


class LegacyButton(ClickListener):
    def __init__(self, output: OutputPort):
        self._output = output

    def on_click(self) -> None:
        self._output.write_line("Clicked Button 1")


class LegacyRadioButton(ClickListener):
    """Radio button that relies on its caller to enable it first."""

    def __init__(self, output: OutputPort):
        self._output = output

    def enable(self) -> None:
        self._output.write_line("Enable the radio button")

    def on_click(self) -> None:
        self._output.write_line("Clicked RadioButton 1")


class LegacyClickHandler:
    """Handler that has to know about the concrete listener type."""

    def perform_click(self, listener: ClickListener) -> None:
        if isinstance(listener, LegacyRadioButton):
            listener.enable()
        listener.on_click()


class Button(ClickListener):
    def __init__(self, output: OutputPort):
        self._output = output

    def on_click(self) -> None:
        self._output.write_line("Enable the button")
        self._output.write_line("Clicked Button 1")


class RadioButton(ClickListener):
    def __init__(self, output: OutputPort):
        self._output = output

    def on_click(self) -> None:
        self._output.write_line("Enable the radio button")
        self._output.write_line("Clicked RadioButton 1")


class ClickHandler:
    """Handler that works with any ClickListener unchanged."""

    def perform_click(self, listener: ClickListener) -> None:
        listener.on_click()
