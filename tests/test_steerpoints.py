from __future__ import annotations

import copy

from falcon_dtc.enums import STPTAirAction
from falcon_dtc.errors import MalformedLine
from falcon_dtc.geo import GeoPoint
from falcon_dtc.steerpoints import (
    NOT_SET,
    LinePoint,
    SteerpointTable,
    ThreatCircle,
    Waypoint,
    WeaponTarget,
)

STPT = """[STPT]
TARGET_5=12.345600, -34.567800, 150.000000, 3, Bridge
target_6=1.000000, 2.000000, 3.000000, 0
ppt_2=10.000000, 20.000000, 5000.000000, 0.000000,SA-6
lineSTPT_0=7.000000, 8.000000, 0.000000
wpntarget_9=4.000000, 5.000000, 6.000000, 17, Depot, east gate
"""


def test_example_waypoint_line_decodes() -> None:
    table = SteerpointTable()

    assert table.decode(STPT) is True
    waypoint = table.waypoint(5)
    assert waypoint is not None
    assert waypoint.point == GeoPoint(12.3456, -34.5678, 150.0)
    assert waypoint.action is STPTAirAction.SPLIT
    assert waypoint.comment == "Bridge"


def test_categories_decode_into_their_lists() -> None:
    table = SteerpointTable()
    table.decode(STPT)

    assert [w.steerpoint_id for w in table.waypoints] == [5, 6]
    assert table.waypoint(6).comment == ""
    threat = table.threat(2)
    assert threat.radius == 5000.0
    assert threat.comment == "SA-6"
    assert table.line_point(0).point == GeoPoint(7.0, 8.0, 0.0)
    target = table.weapon_target(9)
    assert target.action is STPTAirAction.STRIKE
    assert target.comment == "Depot, east gate"
    assert table.waypoint(0) is None


def test_decoding_twice_does_not_accumulate() -> None:
    table = SteerpointTable()
    table.decode(STPT)
    first = copy.deepcopy(table)
    table.decode(STPT)

    assert len(table.waypoints) == 2
    assert len(table.threats) == 1
    assert len(table.lines) == 1
    assert len(table.weapon_targets) == 1
    assert table == first


def test_encode_lines_in_category_order() -> None:
    table = SteerpointTable()
    table.decode(STPT)

    assert table.encode().splitlines() == [
        "[STPT]",
        "target_5=12.345600, -34.567800, 150.000000, 3, Bridge",
        "target_6=1.000000, 2.000000, 3.000000, 0",
        "ppt_2=10.000000, 20.000000, 5000.000000, 0.000000,SA-6",
        "lineSTPT_0=7.000000, 8.000000, 0.000000",
        "wpntarget_9=4.000000, 5.000000, 6.000000, 17, Depot, east gate",
    ]


def test_unknown_keyword_and_wrong_arity_are_skipped() -> None:
    table = SteerpointTable()
    text = (
        "[STPT]\n"
        "bogus_1=1, 2, 3\n"
        "target_1=1.0, 2.0\n"
        "lineSTPT_2=1.0, 2.0, 3.0, 4\n"
        "target_3=1.0, 2.0, 3.0, 0\n"
    )

    assert table.decode(text) is True
    assert [w.steerpoint_id for w in table.waypoints] == [3]
    assert table.lines == []


def test_bad_ordinal_fails_section(sink, faults) -> None:
    table = SteerpointTable()

    assert table.decode("[STPT]\ntarget_x=1.0, 2.0, 3.0, 0\n", report=sink) is False
    assert isinstance(faults[0].error, MalformedLine)


def test_bad_action_fails_section(sink, faults) -> None:
    table = SteerpointTable()

    assert table.decode("[STPT]\ntarget_1=1.0, 2.0, 3.0, 99\n", report=sink) is False


def test_default_tables() -> None:
    table = SteerpointTable()

    assert len(table.waypoints) == 24 + 19
    assert table.waypoint(23).comment == ""
    assert table.waypoint(80).comment == NOT_SET
    assert table.waypoint(50) is None
    assert len(table.threats) == 15
    assert len(table.lines) == 24
    assert len(table.weapon_targets) == 100
    assert table.weapon_target(0).comment == NOT_SET


def test_default_table_round_trips() -> None:
    table = SteerpointTable()
    decoded = SteerpointTable(waypoints=[], threats=[], lines=[], weapon_targets=[])

    assert decoded.decode(table.encode()) is True
    assert decoded == table


def test_records_use_structural_equality() -> None:
    assert Waypoint(1, GeoPoint(1, 2, 3), 3, "a") == Waypoint(
        1, GeoPoint(1.0, 2.0, 3.0), STPTAirAction.SPLIT, "a"
    )
    assert WeaponTarget(1) != Waypoint(1)
    assert ThreatCircle(0, comment=" SAM ") == ThreatCircle(0, comment="SAM")
    assert LinePoint(4) == LinePoint(4, GeoPoint())


def test_threat_radius_setter() -> None:
    threat = ThreatCircle(3)
    threat.radius = 12000

    assert threat.point.elevation == 12000.0


def test_single_line_replaces_default_waypoints() -> None:
    table = SteerpointTable()

    assert table.decode(
        "[STPT]\nTARGET_5=12.345600, -34.567800, 150.000000, 3, Bridge\n"
    )
    assert len(table.waypoints) == 1
    assert table.waypoint(5).action is STPTAirAction.SPLIT
    assert table.waypoint(80) is None
    assert table.threats == []
    assert table.weapon_targets == []
