"""Per-vertex and per-edge graph attributes: their names, defaults and value storage."""

from dataclasses import dataclass, field
from typing import Any, Callable

from roadnet.constants import INFTY, INVALID_EDGE, INVALID_ID, INVALID_VERTEX
from roadnet.point import Point
from roadnet.road_categories import OsmRoadCategory, XatfRoadCategory


@dataclass(frozen=True)
class Attribute:
    """An attribute associating a value with each vertex or edge of a graph.

    The factory produces the default value; it is called anew for every
    default so that mutable defaults are never shared.
    """

    name: str
    factory: Callable[[], Any] = field(compare=False)

    def default(self):
        """Return the attribute's default value."""
        return self.factory()


def bit_attribute(name):
    """Return an attribute holding a single bit per vertex or edge, False by default."""
    return Attribute(name, bool)


CAPACITY = Attribute("capacity", int)
COORDINATE = Attribute("coordinate", Point)
EDGE_ID = Attribute("edge_id", lambda: INVALID_ID)
EDGE_TAIL = Attribute("edge_tail", lambda: INVALID_VERTEX)
FREE_FLOW_SPEED = Attribute("free_flow_speed", int)
LENGTH = Attribute("length", lambda: INFTY)
NUM_LANES = Attribute("num_lanes", float)
OSM_ROAD_CATEGORY = Attribute("osm_road_category", lambda: OsmRoadCategory.ROAD)
ROAD_GEOMETRY = Attribute("road_geometry", list)
SEQUENTIAL_VERTEX_ID = Attribute("sequential_vertex_id", lambda: INVALID_VERTEX)
SPEED_LIMIT = Attribute("speed_limit", int)
TRAVEL_COST = Attribute("travel_cost", lambda: INFTY)
TRAVEL_TIME = Attribute("travel_time", lambda: INFTY)
TRAVERSAL_COST = Attribute("traversal_cost", lambda: INFTY)
UNPACKING_INFO = Attribute("unpacking_info", lambda: (INVALID_EDGE, INVALID_EDGE))
VERTEX_ID = Attribute("vertex_id", lambda: INVALID_ID)
XATF_ROAD_CATEGORY = Attribute("xatf_road_category", lambda: XatfRoadCategory.UNUSED)

ATTRIBUTES = {
    attr.name: attr
    for attr in (
        CAPACITY,
        COORDINATE,
        EDGE_ID,
        EDGE_TAIL,
        FREE_FLOW_SPEED,
        LENGTH,
        NUM_LANES,
        OSM_ROAD_CATEGORY,
        ROAD_GEOMETRY,
        SEQUENTIAL_VERTEX_ID,
        SPEED_LIMIT,
        TRAVEL_COST,
        TRAVEL_TIME,
        TRAVERSAL_COST,
        UNPACKING_INFO,
        VERTEX_ID,
        XATF_ROAD_CATEGORY,
    )
}


class AttributeValues:
    """The values of one attribute for the vertices or edges of a graph."""

    def __init__(self, attribute, size=0):
        self.attribute = attribute
        self._values = []
        self.resize(size)

    def append(self, value=None):
        """Append a value, or the attribute's default if value is None."""
        self._values.append(self.attribute.default() if value is None else value)

    def resize(self, size):
        """Truncate to size values, or extend with default values up to size."""
        if size < 0:
            raise ValueError(f"negative size -- {size}")
        del self._values[size:]
        self._values.extend(self.attribute.default() for _ in range(size - len(self._values)))

    def _check_index(self, index):
        if not 0 <= index < len(self._values):
            raise IndexError(f"{self.attribute.name} index out of range -- {index}")

    def __getitem__(self, index):
        self._check_index(index)
        return self._values[index]

    def __setitem__(self, index, value):
        self._check_index(index)
        self._values[index] = value

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __repr__(self):
        return f"AttributeValues({self.attribute.name!r}, {self._values!r})"