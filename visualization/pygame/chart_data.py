from dataclasses import dataclass, field
from typing import Callable, Optional

from charting.controller import ChartController
from charting.surface import Scene


@dataclass
class ChartPanel:
    """One chart on screen: its scene, the controller drawing it and where it sits"""
    title: str
    controller: ChartController
    x: int
    y: int
    renders: int = 0
    _unsubscribe: Optional[Callable[[], None]] = field(default=None, repr=False)

    @property
    def scene(self) -> Scene:
        return self.controller.surface

    def bind(self, source):
        """Redraw on every list the source emits"""
        self.unbind()
        self._unsubscribe = source.subscribe(self.on_data)

    def unbind(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_data(self, records):
        if self.controller.render(records):
            self.renders += 1
