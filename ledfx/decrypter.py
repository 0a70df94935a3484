"""AES-CBC decryption of AirPlay audio packets."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

RTP_HEADER_SIZE = 12
BLOCK_SIZE = 16


class AesDecrypter:
    """Decrypts the payload of an RTP audio packet.

    Only whole AES blocks are encrypted; a trailing partial block is sent in
    the clear and is passed through unchanged.
    """

    def __init__(self, key: bytes, iv: bytes) -> None:
        self.key = bytes(key)
        self.iv = bytes(iv)
        self._cipher = Cipher(algorithms.AES(self.key), modes.CBC(self.iv))

    def decode(self, data: bytes) -> bytes:
        """Strip the RTP header and return the decrypted payload."""
        if len(data) < RTP_HEADER_SIZE:
            raise ValueError("packet is shorter than an RTP header")
        payload = bytes(data[RTP_HEADER_SIZE:])
        split = len(payload) - len(payload) % BLOCK_SIZE
        if not split:
            return payload
        decryptor = self._cipher.decryptor()
        plain = decryptor.update(payload[:split]) + decryptor.finalize()
        return plain + payload[split:]