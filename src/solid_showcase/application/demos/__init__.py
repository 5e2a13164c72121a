"""One runnable demo per SOLID principle."""
from typing import Callable, Dict

from solid_showcase.domain.base.ports import DemoPort
from solid_showcase.domain.base.value_objects import Principle

from .dip_demo import DipDemo
from .isp_demo import IspDemo
from .lsp_demo import LspDemo
from .ocp_demo import OcpDemo
from .srp_demo import SrpDemo

DEMO_CLASSES: Dict[Principle, Callable[..., DemoPort]] = {
    Principle.SRP: SrpDemo,
    Principle.OCP: OcpDemo,
    Principle.LSP: LspDemo,
    Principle.ISP: IspDemo,
    Principle.DIP: DipDemo,
}

__all__ = ["SrpDemo", "OcpDemo", "LspDemo", "IspDemo", "DipDemo", "DEMO_CLASSES"]
