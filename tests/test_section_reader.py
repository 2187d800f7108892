from __future__ import annotations

import logging

import pytest

from falcon_dtc.avionics import Laser, SensorPower
from falcon_dtc.errors import IndexOutOfRange, MalformedLine, SectionNotFound
from falcon_dtc.section import iter_lines, locate, slot

BUFFER = """[Laser]
LaserST=12
LaserTGP=1688

LaserLST=1511
[SNSR_PWR]
LEFT_HDPT=1
"""


def test_locate_stops_at_next_header() -> None:
    text = locate(BUFFER, "[Laser]")

    assert text.startswith("[Laser]")
    assert "LaserLST=1511" in text
    assert "[SNSR_PWR]" not in text


def test_locate_runs_to_end_of_buffer() -> None:
    assert locate(BUFFER, "[SNSR_PWR]").rstrip().endswith("LEFT_HDPT=1")


def test_locate_missing_header() -> None:
    with pytest.raises(SectionNotFound) as excinfo:
        locate(BUFFER, "[HARM]")
    assert excinfo.value.header == "[HARM]"


def test_iter_lines_skips_header_and_blank_lines() -> None:
    lines = list(iter_lines(locate(BUFFER, "[Laser]")))

    assert lines == ["LaserST=12", "LaserTGP=1688", "LaserLST=1511"]


def test_slot_rejects_negative_and_past_end_indexes() -> None:
    items = [1, 2, 3]

    assert slot(items, 2, "line") == 3
    with pytest.raises(IndexOutOfRange):
        slot(items, 3, "line")
    with pytest.raises(IndexOutOfRange):
        slot(items, -1, "line")


def test_scalar_section_decode() -> None:
    laser = Laser()

    assert laser.decode(BUFFER) is True
    assert (laser.start_time, laser.tgp_code, laser.lst_code) == (12, 1688, 1511)


def test_scalar_keys_match_case_insensitively() -> None:
    laser = Laser()

    assert laser.decode("[Laser]\nlaserst=5\nSomethingElse=1\n")
    assert laser.start_time == 5


def test_fault_goes_to_sink_with_section_text(sink, faults) -> None:
    laser = Laser()

    assert laser.decode("[Laser]\nLaserST=abc\n", report=sink) is False
    assert len(faults) == 1
    fault = faults[0]
    assert fault.section == "[Laser]"
    assert isinstance(fault.error, MalformedLine)
    assert "LaserST=abc" in fault.text


def test_missing_section_is_reported(sink, faults) -> None:
    assert Laser().decode("[HARM]\n", report=sink) is False
    assert isinstance(faults[0].error, SectionNotFound)


def test_default_sink_logs_error(caplog) -> None:
    with caplog.at_level(logging.ERROR):
        assert Laser().decode("[Laser]\nLaserTGP=x\n") is False

    assert "[Laser]" in caplog.text
    assert "LaserTGP=x" in caplog.text


def test_settings_map_replaced_on_decode() -> None:
    power = SensorPower(settings={"OLD": 1})

    assert power.decode(BUFFER)
    assert power.settings == {"LEFT_HDPT": 1}
    assert power.encode() == "[SNSR_PWR]\nLEFT_HDPT=1\n"
