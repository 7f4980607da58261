"""
Retained drawing surface.

Renderers never paint pixels directly: they create, update and remove
shapes under stable ids. A backend (pygame, matplotlib) then paints the
current set of shapes. Ids are tuples whose first item names the group
the shape belongs to, e.g. ("bar", "Open", SeriesKey.CURRENT).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple, Union

ShapeId = Tuple[Hashable, ...]


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    fill: str
    font_size: int = 13
    font_weight: str = "normal"
    font_family: Optional[str] = None
    anchor: str = "middle"         # start | middle | end
    baseline: str = "alphabetic"   # top | middle | alphabetic


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    opacity: float = 1.0
    width: int = 1


Shape = Union[Rect, Text, Line]


class DrawingSurface(ABC):
    """Shapes keyed by id; creation order is paint order."""

    @abstractmethod
    def create(self, shape_id: ShapeId, shape: Shape) -> None: ...

    @abstractmethod
    def update(self, shape_id: ShapeId, shape: Shape) -> None: ...

    @abstractmethod
    def remove(self, shape_id: ShapeId) -> None: ...

    @abstractmethod
    def get(self, shape_id: ShapeId) -> Optional[Shape]: ...

    @abstractmethod
    def ids(self, group: Optional[Hashable] = None) -> List[ShapeId]: ...

    def clear(self) -> None:
        for shape_id in self.ids():
            self.remove(shape_id)


class Scene(DrawingSurface):
    """In-memory surface; backends paint from `items()`."""

    def __init__(self):
        self._shapes: Dict[ShapeId, Shape] = {}

    def create(self, shape_id, shape):
        if shape_id in self._shapes:
            raise KeyError(f"shape {shape_id!r} already exists")
        self._shapes[shape_id] = shape

    def update(self, shape_id, shape):
        if shape_id not in self._shapes:
            raise KeyError(f"no shape {shape_id!r}")
        self._shapes[shape_id] = shape

    def remove(self, shape_id):
        del self._shapes[shape_id]

    def get(self, shape_id):
        return self._shapes.get(shape_id)

    def ids(self, group=None):
        return [i for i in self._shapes if group is None or i[0] == group]

    def clear(self):
        self._shapes.clear()

    def items(self) -> Iterator[Tuple[ShapeId, Shape]]:
        return iter(list(self._shapes.items()))

    def shapes(self, kind=None) -> List[Shape]:
        return [s for s in self._shapes.values() if kind is None or isinstance(s, kind)]

    def __len__(self):
        return len(self._shapes)

    def __contains__(self, shape_id):
        return shape_id in self._shapes


@dataclass
class JoinResult:
    entered: List[ShapeId] = field(default_factory=list)
    updated: List[ShapeId] = field(default_factory=list)
    exited: List[ShapeId] = field(default_factory=list)


def join(surface: DrawingSurface, group: Hashable,
         items: Iterable[Tuple[Tuple[Hashable, ...], Shape]]) -> JoinResult:
    """Reconcile one group of shapes with new data, keyed by id.

    New keys are created, changed shapes updated, equal shapes left alone and
    ids of the group missing from `items` removed. A repeated key keeps the
    last shape given for it.
    """
    wanted: Dict[ShapeId, Shape] = {}
    for key, shape in items:
        wanted[(group,) + tuple(key)] = shape

    result = JoinResult()
    for shape_id in surface.ids(group):
        if shape_id not in wanted:
            surface.remove(shape_id)
            result.exited.append(shape_id)

    for shape_id, shape in wanted.items():
        current = surface.get(shape_id)
        if current is None:
            surface.create(shape_id, shape)
            result.entered.append(shape_id)
        elif current != shape:
            surface.update(shape_id, shape)
            result.updated.append(shape_id)
    return result
