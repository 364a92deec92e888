from __future__ import annotations

import socket

import pytest

from restic_generator.core.errors import HostnameError
from restic_generator.core.hostname import MAX_HOSTNAME_BYTES, HostnameResolver


def test_hostname_returns_system_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(socket, "gethostname", lambda: "laptop")

    assert HostnameResolver().hostname() == "laptop"


def test_hostname_is_truncated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(socket, "gethostname", lambda: "h" * 300)

    assert HostnameResolver().hostname() == "h" * MAX_HOSTNAME_BYTES


def test_hostname_lookup_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken() -> str:
        raise OSError(22, "Invalid argument")

    monkeypatch.setattr(socket, "gethostname", broken)

    with pytest.raises(HostnameError, match="gethostname failed"):
        HostnameResolver().hostname()


def test_hostname_must_be_utf8(monkeypatch: pytest.MonkeyPatch) -> None:
    # gethostname decodes undecodable bytes to lone surrogates
    monkeypatch.setattr(socket, "gethostname", lambda: "host\udcff")

    with pytest.raises(HostnameError, match="not valid UTF-8"):
        HostnameResolver().hostname()
