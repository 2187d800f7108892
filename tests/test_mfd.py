from __future__ import annotations

import logging

from falcon_dtc.enums import MFDColorOption, MFDColorSetting, MFDMasterMode
from falcon_dtc.errors import IndexOutOfRange, MalformedLine
from falcon_dtc.mfd import MFD, MFD_COUNT, MFDColors, default_colors


def test_mfd_encoder_emits_every_slot() -> None:
    mfd = MFD()
    lines = mfd.encode().splitlines()

    assert lines[0] == "[MFD]"
    assert len(lines) - 1 == MFD_COUNT * 6 * 4
    # dogfight override pages lead the section
    assert lines[1:5] == [
        "Display0-5-0=0",
        "Display0-5-1=0",
        "Display0-5-2=0",
        "Display0-5-csel=0",
    ]
    assert lines[17] == "Display0-0-0=0"


def test_mfd_decode_sets_page_slots() -> None:
    mfd = MFD()
    text = "[MFD]\nDisplay1-2-0=7\nDisplay1-2-csel=2\nDisplay3-5-2=11\n"

    assert mfd.decode(text) is True
    nav = mfd.displays[1].page(MFDMasterMode.NAV)
    assert (nav.left, nav.selected) == (7, 2)
    assert mfd.displays[3].page(MFDMasterMode.SJ).right == 11


def test_mfd_display_out_of_range(sink, faults) -> None:
    mfd = MFD()

    assert mfd.decode("[MFD]\nDisplay4-0-0=1\n", report=sink) is False
    assert isinstance(faults[0].error, IndexOutOfRange)


def test_mfd_round_trip() -> None:
    mfd = MFD()
    mfd.displays[2].page(MFDMasterMode.AG).center = 9

    decoded = MFD()
    assert decoded.decode(mfd.encode())
    assert decoded == mfd


def test_default_color_table() -> None:
    colors = MFDColors()

    assert len(colors.colors) == len(MFDColorSetting) == 78
    assert colors.color(MFDColorSetting.BULLSEYE) is MFDColorOption.YELLOW
    assert colors.color(MFDColorSetting.LINES) is MFDColorOption.DEFAULT
    assert colors.colors == default_colors()


def test_missing_colors_use_defaults_and_are_not_written(sink, faults, caplog) -> None:
    colors = MFDColors()
    colors.set_color(MFDColorSetting.LINES, MFDColorOption.BLUE)

    with caplog.at_level(logging.INFO):
        assert colors.decode("[MFD]\n", report=sink) is True

    assert faults == []
    assert colors.colors == default_colors()
    assert colors.encode() == ""
    assert "[COLORS]" in caplog.text


def test_colors_decode_and_encode() -> None:
    colors = MFDColors()
    values = [int(c) for c in default_colors()]
    values[MFDColorSetting.LINES] = int(MFDColorOption.BLUE)
    text = f"[COLORS]\nColorConfig={len(values)} {' '.join(map(str, values))}\n"

    assert colors.decode(text) is True
    assert colors.color(MFDColorSetting.LINES) is MFDColorOption.BLUE
    assert colors.include_in_output
    assert colors.encode() == text


def test_colors_short_list_leaves_remaining_defaults() -> None:
    colors = MFDColors()

    assert colors.decode("[COLORS]\nColorConfig=2 5 6\n") is True
    assert colors.colors[:2] == [MFDColorOption.CYAN, MFDColorOption.MAGENTA]
    assert colors.colors[2:] == default_colors()[2:]


def test_colors_count_mismatch_fails(sink, faults) -> None:
    colors = MFDColors()

    assert colors.decode("[COLORS]\nColorConfig=3 5 6\n", report=sink) is False
    assert isinstance(faults[0].error, MalformedLine)


def test_colors_too_many_values_fail(sink, faults) -> None:
    values = " ".join(["1"] * 79)

    assert MFDColors().decode(f"[COLORS]\nColorConfig=79 {values}\n", report=sink) is False
    assert isinstance(faults[0].error, IndexOutOfRange)
