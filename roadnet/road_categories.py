"""Road categories of OpenStreetMap and of the XATF file format."""

import enum


class EnumParser:
    """Translates names into enum values using a fixed name-to-value mapping."""

    def __init__(self, name_to_enum):
        self._name_to_enum = dict(name_to_enum)

    def __call__(self, name):
        """Return the enum value with the given name."""
        try:
            return self._name_to_enum[name]
        except KeyError:
            raise ValueError(f"no enum value with the specified name -- '{name}'") from None


class OsmRoadCategory(enum.Enum):
    """Road categories defined by OpenStreetMap."""

    MOTORWAY = 0
    TRUNK = 1
    PRIMARY = 2
    SECONDARY = 3
    TERTIARY = 4
    UNCLASSIFIED = 5
    RESIDENTIAL = 6
    MOTORWAY_LINK = 7
    TRUNK_LINK = 8
    PRIMARY_LINK = 9
    SECONDARY_LINK = 10
    TERTIARY_LINK = 11
    LIVING_STREET = 12
    ROAD = 13

    def __str__(self):
        return self.name.lower()


class XatfRoadCategory(enum.IntEnum):
    """Road categories defined by the XATF file format."""

    MOTORWAY_FAST = 1
    MOTORWAY_MEDIUM = 2
    MOTORWAY_SLOW = 3
    NATIONAL_ROAD_FAST = 4
    NATIONAL_ROAD_MEDIUM = 5
    NATIONAL_ROAD_SLOW = 6
    REGIONAL_ROAD_FAST = 7
    REGIONAL_ROAD_MEDIUM = 8
    REGIONAL_ROAD_SLOW = 9
    URBAN_STREET_FAST = 10
    URBAN_STREET_MEDIUM = 11
    URBAN_STREET_SLOW = 12
    FERRY = 13
    UNUSED = 14
    FOREST_ROAD = 15


_OSM_PARSER = EnumParser({str(category): category for category in OsmRoadCategory})


def parse_osm_road_category(name):
    """Return the OSM road category with the given name, such as 'motorway_link'."""
    return _OSM_PARSER(name)