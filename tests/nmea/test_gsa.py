"""Tests for GSA sentence parsing."""

import pytest

from gpsnmea import parse_gsa
from gpsnmea.nmea.types import GsaFixType, GsaMode

GSA_VALID = "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"


class TestParseGSA:
    def test_valid_gsa(self):
        result = parse_gsa(GSA_VALID)
        assert result is not None
        assert result.mode is GsaMode.AUTOMATIC
        assert result.fix_type is GsaFixType.THREE_D
        assert result.satellites == (4, 5, 9, 12, 24)
        assert result.dilution_of_precision == pytest.approx(2.5)
        assert result.horizontal_dilution_of_precision == pytest.approx(1.3)
        assert result.vertical_dilution_of_precision == pytest.approx(2.1)
        assert result.checksum == 0x39

    def test_empty_slots_are_omitted(self):
        result = parse_gsa("$GPGSA,A,3,,01,,,02,,,03,,04,,05,1.0,1.0,1.0*00")
        assert result is not None
        assert result.satellites == (1, 2, 3, 4, 5)

    def test_all_twelve_slots_populated(self):
        result = parse_gsa("$GPGSA,A,3,01,02,03,04,05,06,07,08,09,10,11,12,1.0,0.8,0.6*3E")
        assert result is not None
        assert result.satellites == tuple(range(1, 13))

    def test_no_satellites(self):
        result = parse_gsa("$GPGSA,M,2,,,,,,,,,,,,,9.9,9.9,9.9*3F")
        assert result is not None
        assert result.mode is GsaMode.MANUAL
        assert result.fix_type is GsaFixType.TWO_D
        assert result.satellites == ()

    def test_unavailable_fix_type(self):
        result = parse_gsa(GSA_VALID.replace(",A,3,", ",A,1,"))
        assert result is not None
        assert result.fix_type is GsaFixType.UNAVAILABLE

    def test_eleven_slots(self):
        assert parse_gsa("$GPGSA,A,3,04,05,,09,12,,,24,,,,2.5,1.3,2.1*39") is None

    def test_thirteen_slots(self):
        assert parse_gsa("$GPGSA,A,3,04,05,,09,12,,,24,,,,,,2.5,1.3,2.1*39") is None

    def test_single_digit_prn(self):
        assert parse_gsa(GSA_VALID.replace(",04,", ",4,")) is None

    def test_three_digit_prn(self):
        assert parse_gsa(GSA_VALID.replace(",04,", ",104,")) is None

    def test_unknown_fix_type(self):
        assert parse_gsa(GSA_VALID.replace(",A,3,", ",A,4,")) is None

    def test_missing_vdop(self):
        assert parse_gsa("$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,*39") is None
