from __future__ import annotations

import socket

from .errors import HostnameError

# Size of the buffer handed to gethostname(2); longer names are cut here.
MAX_HOSTNAME_BYTES = 128


class HostnameResolver:
    def hostname(self) -> str:
        try:
            name = socket.gethostname()
        except OSError as exc:
            raise HostnameError(f"gethostname failed: {exc}") from exc

        try:
            raw = name.encode("utf-8")[:MAX_HOSTNAME_BYTES]
            return raw.decode("utf-8")
        except UnicodeError as exc:
            raise HostnameError(f"hostname is not valid UTF-8: {name!r}") from exc
