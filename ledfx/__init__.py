"""RTSP, SDP, DAAP and DACP tools for AirPlay audio, and UDP LED output with simple effects."""

__version__ = "0.1.0"