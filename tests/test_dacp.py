import pytest
import requests
import responses

from ledfx.dacp import DacpClient


def _client() -> DacpClient:
    return DacpClient("1.1.1.1", 333, "testID", "testActiveRemote")


@pytest.mark.parametrize(
    ("action", "expected_url"),
    [
        ("play", "http://1.1.1.1:333/ctrl-int/1/play"),
        ("pause", "http://1.1.1.1:333/ctrl-int/1/pause"),
        ("play_pause", "http://1.1.1.1:333/ctrl-int/1/playpause"),
        ("stop", "http://1.1.1.1:333/ctrl-int/1/stop"),
        ("next", "http://1.1.1.1:333/ctrl-int/1/nextitem"),
    ],
)
def test_command_url_and_header(action, expected_url):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, expected_url, body="OK", status=200)
        response = getattr(_client(), action)()
        assert response.status_code == 200
        assert response.text == "OK"
        assert len(rsps.calls) == 1
        request = rsps.calls[0].request
        assert request.url == expected_url
        assert request.headers["Active-Remote"] == "testActiveRemote"


def test_response_is_returned():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://1.1.1.1:333/ctrl-int/1/play", body="OK")
        response = _client().play()
    assert response.status_code == 200
    assert response.text == "OK"


def test_uses_given_session():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://1.1.1.1:333/ctrl-int/1/stop", body="OK")
        session = requests.Session()
        session.headers["X-Extra"] = "yes"
        client = DacpClient("1.1.1.1", 333, "testID", "testActiveRemote", session)
        response = client.stop()
        assert response.text == "OK"
        assert rsps.calls[0].request.headers["X-Extra"] == "yes"


def test_connection_failure_raises():
    with responses.RequestsMock(assert_all_requests_are_fired=False):
        with pytest.raises(requests.exceptions.ConnectionError):
            _client().play()