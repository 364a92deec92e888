from __future__ import annotations

REMOTE_PREFIXES = (
    "azure:",
    "b2:",
    "gs:",
    "rclone:",
    "s3:",
    "sftp:",
    "swift:",
)


def is_local(location: str) -> bool:
    return not location.startswith(REMOTE_PREFIXES)
