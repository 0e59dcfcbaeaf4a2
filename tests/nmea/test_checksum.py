"""Tests for NMEA checksum computation and validation."""

from gpsnmea import compute_checksum, validate_checksum

GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
VTG_VALID = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
GSA_VALID = "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"


class TestComputeChecksum:
    def test_known_sentence(self):
        assert compute_checksum("GPGLL,4916.45,N,12311.12,W,225444,A,A") == 0x5C

    def test_empty_content(self):
        assert compute_checksum("") == 0

    def test_single_character(self):
        assert compute_checksum("A") == ord("A")


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is True

    def test_valid_gsa_checksum(self):
        assert validate_checksum(GSA_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_VALID + "\r\n") is True

    def test_lowercase_hex_digits(self):
        sentence = "$GNVTG,,T,,M,0.0,N,0.0,K,A*3d"
        assert validate_checksum(sentence) is True

    def test_invalid_checksum(self):
        sentence = GGA_VALID[:-2] + "FF"
        assert validate_checksum(sentence) is False

    def test_non_hex_checksum(self):
        assert validate_checksum(GGA_VALID[:-2] + "ZZ") is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(GGA_VALID[1:]) is False

    def test_missing_asterisk(self):
        sentence = GGA_VALID.replace("*", "")
        assert validate_checksum(sentence) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_truncated_checksum(self):
        assert validate_checksum(GGA_VALID[:-1]) is False

    def test_trailing_characters_after_checksum(self):
        assert validate_checksum(GGA_VALID + " ") is False

    def test_valid_vtg_checksum(self):
        assert validate_checksum(VTG_VALID) is True
