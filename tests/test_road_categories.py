import pytest

from roadnet.road_categories import (
    EnumParser,
    OsmRoadCategory,
    XatfRoadCategory,
    parse_osm_road_category,
)
from roadnet.strings import lexical_cast


@pytest.mark.parametrize("category", list(OsmRoadCategory))
def test_osm_name_round_trip(category):
    assert parse_osm_road_category(str(category)) is category


def test_osm_names_from_format():
    assert parse_osm_road_category("motorway_link") is OsmRoadCategory.MOTORWAY_LINK
    assert parse_osm_road_category("living_street") is OsmRoadCategory.LIVING_STREET
    assert str(OsmRoadCategory.ROAD) == "road"


@pytest.mark.parametrize("name", ["Motorway", "highway", "", " road"])
def test_unknown_osm_name_raises(name):
    with pytest.raises(ValueError, match="no enum value"):
        parse_osm_road_category(name)


def test_enum_parser_with_custom_mapping():
    parser = EnumParser({"fast": XatfRoadCategory.MOTORWAY_FAST, "boat": XatfRoadCategory.FERRY})
    assert parser("boat") is XatfRoadCategory.FERRY
    with pytest.raises(ValueError):
        parser("slow")


def test_xatf_category_from_text():
    assert lexical_cast("13", XatfRoadCategory) is XatfRoadCategory.FERRY
    assert lexical_cast("15", XatfRoadCategory) is XatfRoadCategory.FOREST_ROAD


def test_xatf_unknown_number_raises():
    with pytest.raises(ValueError):
        lexical_cast("16", XatfRoadCategory)


def test_xatf_categories_are_consecutive():
    by_value = [XatfRoadCategory(value) for value in range(1, 16)]
    assert by_value == list(XatfRoadCategory)
    assert by_value[0] is XatfRoadCategory.MOTORWAY_FAST
    assert by_value[-1] is XatfRoadCategory.FOREST_ROAD