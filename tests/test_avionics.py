from __future__ import annotations

from falcon_dtc.avionics import (
    FCCAGB,
    FCCAGM,
    FCCAIM,
    HUD,
    OTW,
    InternalLighting,
    Laser,
    MissionName,
)
from falcon_dtc.enums import (
    AIM9SearchMode,
    CardinalDirection,
    FCRSubmode,
    FuzeMode,
    HUDAltitude,
    OTWViewSetting,
)
from falcon_dtc.errors import IndexOutOfRange, MalformedLine


def test_laser_defaults_encode() -> None:
    assert Laser().encode() == "[Laser]\nLaserST=8\nLaserTGP=1520\nLaserLST=1520\n"


def test_fcc_aim_keys_with_punctuation() -> None:
    aim = FCCAIM()

    assert aim.decode("[FCC_AIM]\nAIM-9_Spot/Scan=0\nAIM120_TargetSize=2\n") is True
    assert aim.aim9_search is AIM9SearchMode.SPOT
    assert "AIM-9_Spot/Scan=0" in aim.encode().splitlines()


def test_fcc_agm_decode() -> None:
    agm = FCCAGM()

    assert agm.decode("[FCC_AGM]\nMaverick_AutoPwr=1\nMaverick_AutoPwrDir=3\n")
    assert agm.auto_power is True
    assert agm.auto_power_direction is CardinalDirection.SOUTHEAST


def test_bombing_profiles() -> None:
    agb = FCCAGB()
    text = (
        "[FCC_AGB]\n"
        "Profile2_Submode=7\n"
        "Profile2_Fuze=2\n"
        "Profile2_SGL/PAIR=1\n"
        "Profile2_Release_Spacing=175\n"
        "Profile2_C1_AD1=350.5\n"
    )

    assert agb.decode(text) is True
    first, second = agb.profiles
    assert first.submode is FCRSubmode.CCRP
    assert second.submode is FCRSubmode.CCIP
    assert second.fuze is FuzeMode.NSTL
    assert second.pair_release is True
    assert second.spacing == 175
    assert second.c1_arming_delay1 == 350.5

    lines = agb.encode().splitlines()
    assert len(lines) == 1 + 2 * 10
    assert lines[1] == "Profile1_Submode=8"
    assert "Profile2_C1_AD1=350.500000" in lines

    decoded = FCCAGB()
    assert decoded.decode(agb.encode())
    assert decoded == agb


def test_bombing_profile_out_of_range(sink, faults) -> None:
    assert FCCAGB().decode("[FCC_AGB]\nProfile3_Fuze=1\n", report=sink) is False
    assert isinstance(faults[0].error, IndexOutOfRange)


def test_hud_and_otw() -> None:
    hud = HUD()
    otw = OTW()

    assert hud.altitude is HUDAltitude.AUTO
    assert otw.mode is OTWViewSetting.PIT_3D
    assert hud.decode("[Hud]\nAlt=1\nBrightness=3\n")
    assert hud.altitude is HUDAltitude.BARO
    assert hud.brightness == 3


def test_otw_rejects_unknown_view(sink, faults) -> None:
    assert OTW().decode("[OTW]\nMode=0\n", report=sink) is False
    assert isinstance(faults[0].error, MalformedLine)


def test_settings_map_uppercases_keys() -> None:
    lighting = InternalLighting()

    assert lighting.decode("[INT_LIGHTING]\nflood=2\nPRIMARY=1\n")
    assert lighting.settings == {"FLOOD": 2, "PRIMARY": 1}
    assert lighting.encode() == "[INT_LIGHTING]\nFLOOD=2\nPRIMARY=1\n"


def test_mission_title() -> None:
    mission = MissionName()

    assert mission.decode("[MISSION]\ntitle= Operation Ember \n")
    assert mission.title == "Operation Ember"
    assert mission.encode() == "[MISSION]\ntitle=Operation Ember\n"
