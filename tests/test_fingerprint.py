# File: tests/test_fingerprint.py
import hashlib

import pytest

from argos.watcher.fingerprint import Fingerprint, fingerprint


def test_fingerprint_is_sha224_hex():
    fp = fingerprint("hello")
    assert fp.hex == hashlib.sha224(b"hello").hexdigest()
    assert str(fp) == fp.hex
    assert len(fp.digest) == 28
    assert fp.hex == fp.hex.lower()


@pytest.mark.parametrize(
    "left,right",
    [
        ("<html></html>", "<html></html> "),
        ("abc", "abd"),
        ("line\n", "line\r\n"),
        ("", " "),
    ],
)
def test_any_byte_difference_changes_fingerprint(left, right):
    assert fingerprint(left) != fingerprint(right)


def test_identical_bodies_share_fingerprint():
    body = "<html><body>Привет</body></html>"
    assert fingerprint(body) == fingerprint("<html><body>Привет</body></html>")
    assert hash(fingerprint(body)) == hash(fingerprint(body))


def test_empty_body_has_real_fingerprint():
    fp = fingerprint("")
    assert fp.hex == "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f"
    assert fp == Fingerprint(hashlib.sha224(b"").digest())
