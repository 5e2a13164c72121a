"""Domain ports for infrastructure concerns."""

from .container_port import ContainerPort
from .demo_port import DemoPort
from .output_port import OutputPort

__all__ = [
    "OutputPort",
    "DemoPort",
    "ContainerPort",
]
