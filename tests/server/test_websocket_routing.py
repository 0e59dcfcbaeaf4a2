"""Tests for websocket payload routing logic."""

from fastapi.testclient import TestClient

from server.main import app
from tests.server.conftest import ControlledNMEAReader
from tests.server.helpers import (
    BROKEN_LINE,
    GGA_LINE,
    GSA_LINE,
    GSV_LINE,
    RMC_LINE,
    VTG_LINE,
)


def test_gga_message(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.line_queue.put(GGA_LINE)
        data = websocket.receive_json()
        assert data["type"] == "gga"
        assert data["fix_quality"] == "gps_fix"
        assert data["satellites_tracked"] == 8
        assert data["position"]["latitude"] == {
            "degrees": 48,
            "minutes": 7.038,
            "direction": "north",
        }
        assert data["dgps_update_age"] is None
        assert data["checksum"] == 0x47


def test_gsa_satellites_become_a_list(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.line_queue.put(GSA_LINE)
        data = websocket.receive_json()
        assert data["type"] == "gsa"
        assert data["satellites"] == [4, 5, 9, 12, 24]
        assert data["fix_type"] == "three_d"


def test_gsv_absent_snr_is_null(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.line_queue.put(GSV_LINE)
        data = websocket.receive_json()
        assert data["type"] == "gsv"
        assert data["satellites"] == [
            {
                "satellite_id": 32,
                "elevation": 17,
                "azimuth": 250,
                "signal_to_noise_ratio": None,
            }
        ]


def test_rmc_void_fix(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.line_queue.put(RMC_LINE)
        data = websocket.receive_json()
        assert data["type"] == "rmc"
        assert data["data_status"] == "invalid"
        assert data["course_over_ground_degrees"] is None
        assert data["date"] == {"day": 19, "month": 11, "year": 94}


def test_unparsed_line_is_forwarded(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.line_queue.put(BROKEN_LINE)
        data = websocket.receive_json()
        assert data == {"type": "unparsed", "text": BROKEN_LINE}


def test_messages_keep_reader_order(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.line_queue.put(VTG_LINE)
        nmea_controller.line_queue.put(BROKEN_LINE)
        nmea_controller.line_queue.put(GGA_LINE)
        types = [websocket.receive_json()["type"] for _ in range(3)]
        assert types == ["vtg", "unparsed", "gga"]
