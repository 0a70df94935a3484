import socket

import pytest

from ledfx.rtsp_session import PortSet, Session
from ledfx.sdp import SessionDescription


def _send_udp(port, payload):
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sender:
        sender.sendto(payload, ("127.0.0.1", port))


class _Upper:
    def decode(self, data):
        return data.upper()


class _Broken:
    def decode(self, data):
        raise ValueError("bad packet")


def test_init_receive_records_local_port():
    session = Session(SessionDescription())
    session.init_receive()
    try:
        assert session.local_ports.data == session.data_conn().getsockname()[1]
        assert session.local_ports.data > 0
    finally:
        session.close()


def test_received_packets_are_queued_and_close_ends_stream():
    session = Session(SessionDescription())
    session.init_receive()
    session.start_receiving()
    _send_udp(session.local_ports.data, b"audio-packet")
    assert session.data_queue.get(timeout=2) == b"audio-packet"
    session.close()
    assert session.data_queue.get(timeout=2) is None


def test_decrypter_is_applied():
    session = Session(SessionDescription(), _Upper())
    session.init_receive()
    session.start_receiving()
    _send_udp(session.local_ports.data, b"abc")
    try:
        assert session.data_queue.get(timeout=2) == b"ABC"
    finally:
        session.close()


def test_decrypter_failure_ends_stream():
    session = Session(SessionDescription(), _Broken())
    session.init_receive()
    session.start_receiving()
    _send_udp(session.local_ports.data, b"abc")
    try:
        assert session.data_queue.get(timeout=2) is None
    finally:
        session.close()


def test_start_receiving_without_init_raises():
    session = Session(SessionDescription())
    with pytest.raises(RuntimeError):
        session.start_receiving()


def test_start_sending_delivers_to_remote_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as receiver:
        receiver.bind(("127.0.0.1", 0))
        receiver.settimeout(2)
        session = Session(SessionDescription())
        session.remote_ports = PortSet(address="127.0.0.1", data=receiver.getsockname()[1])
        session.start_sending()
        try:
            session.data_conn().send(b"payload")
            assert receiver.recv(64) == b"payload"
        finally:
            session.close()


def test_close_without_receiving_closes_socket():
    session = Session(SessionDescription())
    session.init_receive()
    conn = session.data_conn()
    session.close()
    assert conn.fileno() == -1


def test_new_session_keeps_description_and_has_no_connection():
    description = SessionDescription(session_name="AirTunes")
    session = Session(description)
    assert session.description is description
    assert session.data_conn() is None