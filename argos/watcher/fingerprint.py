"""argos.watcher.fingerprint: SHA-224 fingerprints of page bodies."""

from __future__ import annotations

import hashlib

__all__ = ["Fingerprint", "fingerprint"]


class Fingerprint:
    """Opaque digest of a page body, compared by its raw bytes."""

    __slots__ = ("_digest",)

    def __init__(self, digest: bytes) -> None:
        self._digest = bytes(digest)

    @property
    def digest(self) -> bytes:
        return self._digest

    @property
    def hex(self) -> str:
        """Lowercase hexadecimal rendering used for display and logs."""
        return self._digest.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fingerprint):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self) -> int:
        return hash(self._digest)

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        return f"Fingerprint({self.hex!r})"


def fingerprint(body: str) -> Fingerprint:
    """Hash the UTF-8 bytes of *body*; any byte difference yields a new fingerprint."""
    return Fingerprint(hashlib.sha224(body.encode("utf-8")).digest())
