"""Interface Segregation Principle - item clicks versus radio clicks."""
from abc import ABC, abstractmethod

from solid_showcase.domain.base.ports import OutputPort


class LegacyClickListener(ABC):
    """One listener contract covering two unrelated kinds of click."""

    @abstractmethod
    def on_item_click(self, position: int) -> None:
        pass

    @abstractmethod
    def on_radio_click(self, position: int) -> None:
        pass


class LegacyItemList(LegacyClickListener):
    """A plain list forced to implement radio clicks it never receives."""

    def __init__(self, output: OutputPort):
        self._output = output

    def on_item_click(self, position: int) -> None:
        self._output.write_line(f"Clicked position is {position}")

    def on_radio_click(self, position: int) -> None:
        pass


class ItemClickListener(ABC):
    @abstractmethod
    def on_item_click(self, position: int) -> None:
        pass


class RadioClickListener(ABC):
    @abstractmethod
    def on_radio_click(self, position: int) -> None:
        pass


class ItemList(ItemClickListener):
    def __init__(self, output: OutputPort):
        self._output = output

    def on_item_click(self, position: int) -> None:
        self._output.write_line(f"Clicked position is {position}")


class RadioGroup(RadioClickListener):
    def __init__(self, output: OutputPort):
        self._output = output

    def on_radio_click(self, position: int) -> None:
        self._output.write_line(f"Clicked radio position is {position}")
