# ledfx

Building blocks for AirPlay (RAOP) audio streams and for driving LED strips over UDP.

## Modules

- `ledfx.sdp`: the `SessionDescription` data model (`Origin`, `ConnectData`, `Timing`, `MediaDescription`), `parse` for text, bytes or a readable stream, and `serialize` to CRLF-terminated SDP text.
- `ledfx.rtsp_types`: the `Method` and `Status` enums, the `Request` and `Response` dataclasses, and the lookups `get_method`, `get_methods` and `get_status` (unknown names or codes raise `ValueError`).
- `ledfx.rtsp_parser`: `read_request`, `read_response`, `write_request` and `write_response` on binary streams. Malformed messages raise `RtspParseError`; a stream that ends early raises `EOFError`.
- `ledfx.rtsp_client.RtspClient`: one TCP connection to an RTSP server. `send` adds `CSeq` and `User-Agent` headers and returns the response. Usable as a context manager.
- `ledfx.rtsp_server.RtspServer`: a threaded server that passes each request to the handler registered for its method with `add_handler`. Without a host, it binds to the machine's outbound IPv4 address. Port `0` picks a free port, and `port` holds the bound port after `start`.
- `ledfx.rtsp_session.Session`: the UDP side of a stream. `init_receive` and `start_receiving` put received packets on `data_queue`, decrypted when a decrypter is given, and `None` marks the end of the stream. `start_sending` connects to `remote_ports`.
- `ledfx.raop_client.establish_session`: runs the OPTIONS, ANNOUNCE, SETUP and RECORD handshake against a receiver for `CodecType.ALAC` or `CodecType.PCM`. It returns a `Session` with the remote ports filled in, and raises `HandshakeError` on any status other than OK.
- `ledfx.daap`: `parse_daap` and `encode_daap` for the album (`daap.songalbum`), artist (`daap.songartist`), title (`dmap.itemname`) and item kind (`dmap.itemkind`) tags. `format_track` builds a "now playing" line.
- `ledfx.dacp.DacpClient`: sends `play`, `pause`, `play_pause`, `stop` and `next` to a sender's DACP endpoint over HTTP, with the `Active-Remote` header.
- `ledfx.decrypter.AesDecrypter`: strips the 12-byte RTP header and AES-CBC decrypts the whole blocks of the payload. A trailing partial block passes through unchanged.
- `ledfx.audio_codec`: `normalize_audio` scales 16-bit little-endian PCM by a volume, clamped to ±32767. `read_int16_from_bytes`, `read_int16` and `write_int16` read and write single little-endian int16 values.
- `ledfx.volume`: `normalize_volume` maps AirPlay volume (-144 for mute, otherwise -30 to 0) to the range 0 to 1, and `prepare_volume` maps it back.
- `ledfx.udp_device`: `UdpDevice` sends colour frames with the `UdpProtocol` WARLS, DRGB, DRGBW or DNRGB realtime formats. It uses port 21324 by default, and DNRGB when no protocol is given. `colors_to_bytes` turns colours with channels from 0 to 1 into bytes.
- `ledfx.effects`: the `Effect` base class with `SolidEffect` and `PulsingEffect`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Parse an SDP payload:

```python
from ledfx.sdp import parse

description = parse(b"v=0\r\ns=AirTunes\r\na=rtpmap:96 AppleLossless\r\n")
print(description.attributes["rtpmap"])  # 96 AppleLossless
```

Serve and query RTSP locally:

```python
from ledfx.rtsp_client import RtspClient
from ledfx.rtsp_server import RtspServer
from ledfx.rtsp_types import Method, Request, Status, get_methods

def on_options(request, response, local_addr, remote_addr):
    response.status = Status.OK
    response.headers["Public"] = " ".join(get_methods())

server = RtspServer(0, "127.0.0.1")
server.add_handler(Method.OPTIONS, on_options)
server.start()
with RtspClient("127.0.0.1", server.port) as client:
    reply = client.send(Request(method=Method.OPTIONS, request_uri="*"))
    print(reply.status, reply.headers["Public"])
server.stop()
```

Round-trip track metadata:

```python
from ledfx.daap import encode_daap, parse_daap

payload = encode_daap({"dmap.itemname": "Song", "daap.songartist": "Artist"})
print(parse_daap(payload))  # {'dmap.itemname': 'Song', 'daap.songartist': 'Artist'}
```

Build a frame for a WLED strip:

```python
from ledfx.effects import PulsingEffect
from ledfx.udp_device import UdpDevice, UdpProtocol

frame = PulsingEffect().assemble_frame(1.2, 30, (1.0, 0.5, 0.0))
device = UdpDevice("strip", "192.168.1.50", protocol=UdpProtocol.DNRGB)
packet = device.build_packet(frame, 0xFF)   # header, LED offset, RGB bytes
with device:                                # opens and closes the UDP socket
    device.send_data(frame, 0xFF)
```

Convert volumes:

```python
from ledfx.volume import normalize_volume, prepare_volume

normalize_volume(-15.0)  # 0.5
prepare_volume(0.5)      # -15.0
```

## What this package does not do

This package is a library. It provides no command-line program and no web frontend.

It does not put these pieces together into a running AirPlay receiver. In particular, it does not:

- advertise the service or discover DACP senders on the network;
- answer the Apple challenge or decrypt the RSA-wrapped AES key;
- decode ALAC audio;
- run a player that feeds received audio to outputs.

There is no device configuration storage, and there is no audio analysis that drives the LED effects.