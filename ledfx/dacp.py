"""DACP remote control of the AirPlay sender that is streaming to us."""

from __future__ import annotations

from typing import Optional

import requests

DEFAULT_TIMEOUT = 5.0


class DacpClient:
    """Sends playback commands back to a DACP-capable sender."""

    def __init__(
        self,
        ip_address: str,
        port: int,
        dacp_id: str,
        active_remote: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.ip_address = ip_address
        self.port = port
        self.dacp_id = dacp_id
        self.active_remote = active_remote
        self.timeout = DEFAULT_TIMEOUT
        self._session = session if session is not None else requests.Session()

    def _execute(self, command: str) -> requests.Response:
        url = f"http://{self.ip_address}:{self.port}/ctrl-int/1/{command}"
        return self._session.get(
            url, headers={"Active-Remote": self.active_remote}, timeout=self.timeout
        )

    def play(self) -> requests.Response:
        """Resume playback."""
        return self._execute("play")

    def pause(self) -> requests.Response:
        """Pause playback."""
        return self._execute("pause")

    def play_pause(self) -> requests.Response:
        """Toggle between playing and paused."""
        return self._execute("playpause")

    def stop(self) -> requests.Response:
        """Stop playback."""
        return self._execute("stop")

    def next(self) -> requests.Response:
        """Skip to the next item."""
        return self._execute("nextitem")