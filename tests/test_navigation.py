from __future__ import annotations

import copy

import pytest

from falcon_dtc.enums import MapViewSettings, MFDMasterMode, NavOffsetMode
from falcon_dtc.errors import IndexOutOfRange, MalformedLine
from falcon_dtc.navigation import ECHELONS, ICP, MapOptions, NavOffsets, OffsetProfile

NAV_TEXT = """[NAV OFFSETS]
Modesel=vip
VIP=5,45.5,12000,300
VRPPUP=7,-90,6000,0
OA1-3=10.0,2000,50
OA1-4=20.0,3000,60
OA2-6=30,1000,0
"""


def test_nav_offsets_decode() -> None:
    nav = NavOffsets()

    assert nav.decode(NAV_TEXT) is True
    assert nav.mode is NavOffsetMode.VIP
    assert nav.vip == OffsetProfile(5, 45.5, 12000, 300)
    assert nav.vrp_pup.bearing == 270.0
    assert nav.vip_oa1.steerpoint_id == 3
    assert nav.vrp_oa1 == OffsetProfile(4, 20.0, 3000, 60)
    assert nav.vip_oa2.steerpoint_id == 6
    assert nav.vrp_oa2 == OffsetProfile()


def test_nav_offsets_encode() -> None:
    nav = NavOffsets()
    nav.decode(NAV_TEXT)

    assert nav.encode().splitlines() == [
        "[NAV OFFSETS]",
        "Modesel=vip",
        "VIP=5,45.5,12000,300",
        "VIPPUP=0,0.0,0,0",
        "VRP=0,0.0,0,0",
        "VRPPUP=7,270.0,6000,0",
        "OA1-3=10.0,2000,50",
        "OA2-6=30.0,1000,0",
        "OA1-4=20.0,3000,60",
    ]

    decoded = NavOffsets()
    assert decoded.decode(nav.encode())
    assert decoded == nav


def test_nav_offsets_redecode_resets_aimpoints() -> None:
    nav = NavOffsets()
    nav.decode(NAV_TEXT)
    nav.decode(NAV_TEXT)

    assert nav.vip_oa1.steerpoint_id == 3
    assert nav.vrp_oa1.steerpoint_id == 4


def test_offset_profile_normalizes() -> None:
    profile = OffsetProfile(150, 359.97, -20, 10)

    assert profile.steerpoint_id == 99
    assert profile.bearing == 0.0
    assert profile.range == 0
    profile.bearing = -45
    assert profile.bearing == 315.0


@pytest.mark.parametrize("line", ["VIP=5,45", "Modesel=sideways", "OA1-x=1,2,3"])
def test_nav_offsets_malformed(line: str, sink, faults) -> None:
    assert NavOffsets().decode(f"[NAV OFFSETS]\n{line}\n", report=sink) is False
    assert isinstance(faults[0].error, MalformedLine)


def test_map_echelons_are_exclusive_on_set() -> None:
    options = MapOptions()
    options.set_enabled(MapViewSettings.GROUND_BRIGADES)
    options.set_enabled(MapViewSettings.AIRBASES)
    options.set_enabled(MapViewSettings.GROUND_DIVISIONS)

    assert options.is_enabled(MapViewSettings.GROUND_DIVISIONS)
    assert not options.is_enabled(MapViewSettings.GROUND_BRIGADES)
    assert options.is_enabled(MapViewSettings.AIRBASES)

    options.set_enabled(MapViewSettings.GROUND_DIVISIONS, False)
    assert not any(options.is_enabled(e) for e in ECHELONS)


def test_map_decode_keeps_coarsest_echelon() -> None:
    options = MapOptions()
    text = "[MAP_POP]\nMapOpt_0=1\nMapOpt_15=1\nMapOpt_16=1\n"

    assert options.decode(text) is True
    assert options.is_enabled(MapViewSettings.BULLSEYE)
    assert options.is_enabled(MapViewSettings.GROUND_BRIGADES)
    assert not options.is_enabled(MapViewSettings.GROUND_BATTALIONS)


def test_map_encode_does_not_mutate() -> None:
    options = MapOptions()
    options.set_enabled(MapViewSettings.GROUND_BATTALIONS)
    before = options.enabled

    lines = options.encode().splitlines()

    assert options.enabled == before
    assert len(lines) == 1 + len(MapViewSettings)
    assert lines[17] == "MapOpt_16=1"

    decoded = MapOptions()
    assert decoded.decode(options.encode())
    assert decoded == options


def test_map_option_index_out_of_range(sink, faults) -> None:
    assert MapOptions().decode("[MAP_POP]\nMapOpt_34=1\n", report=sink) is False
    assert isinstance(faults[0].error, IndexOutOfRange)


def test_map_options_reject_wrong_length() -> None:
    with pytest.raises(ValueError):
        MapOptions(enabled=(True, False))


def test_icp_decode_and_encode() -> None:
    icp = ICP()
    text = "[ICP]\nMasterMode=1\nAlow AGL=500.000000\nAlow MSL=12500\nBingo_Fuel=3000.5\n"

    assert icp.decode(text) is True
    assert icp.master_mode is MFDMasterMode.AG
    assert icp.alow_agl == 500.0
    assert icp.alow_msl == 12500.0

    lines = icp.encode().splitlines()
    assert lines == [
        "[ICP]",
        "MasterMode=1",
        "Alow AGL=500.000000",
        "Alow MSL=12500",
        "Alow TFAdv=400",
        "Manual Wingspan=35.000000",
        "Bingo_Fuel=3000.500000",
    ]


def test_map_failed_decode_leaves_no_staging_state(sink) -> None:
    options = MapOptions()
    options.set_enabled(MapViewSettings.LABELS)

    assert options.decode("[MAP_POP]\nMapOpt_2=1\nMapOpt_40=1\n", report=sink) is False
    assert "_pending" not in vars(options)
    assert copy.deepcopy(options) == options
    assert options.enabled[MapViewSettings.LABELS]
    assert not options.enabled[MapViewSettings.AIRBASES]

    assert options.decode("[MAP_POP]\nMapOpt_2=1\n") is True
    assert "_pending" not in vars(options)
    assert options.is_enabled(MapViewSettings.AIRBASES)
