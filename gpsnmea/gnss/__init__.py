"""GNSS module for streaming NMEA 0183 sentences from gpsd."""

from gpsnmea.gnss.reader import NMEAReader

__all__ = ["NMEAReader"]
