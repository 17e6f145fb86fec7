"""Links to files on the generated site."""

from __future__ import annotations

from pathlib import PurePosixPath

_LOCAL_URL = "http://127.0.0.1:7979"

_FORM_SAFE = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789*-._"
)


def _form_encode(text: str) -> str:
    return "".join(
        chr(byte) if byte in _FORM_SAFE else "+" if byte == 0x20 else f"%{byte:02X}"
        for byte in text.encode("utf-8")
    )


def _join_prefix(path_prefix: str | None, file_name: str) -> str:
    return f"{path_prefix}/{file_name}" if path_prefix is not None else file_name


def _sanitize_path(path: str, file_name: str) -> str:
    output = "".join("/" + _form_encode(part) for part in PurePosixPath(path).parts)
    if file_name.endswith("/"):
        output += "/"
    return output


def generate_relative(path_prefix: str | None, file_name: str) -> str:
    """Return a root-relative, percent-encoded link to ``file_name``."""
    return _sanitize_path(_join_prefix(path_prefix, file_name), file_name)


def generate_absolute(path_prefix: str | None, file_name: str) -> str:
    """Return an absolute URL to the hosted version of ``file_name``."""
    url = _LOCAL_URL.rstrip("/")
    return url + _sanitize_path(_join_prefix(path_prefix, file_name), file_name)


def build_os_script_path(path_prefix: str | None) -> str:
    """Return the link to the platform-detection script."""
    return generate_relative(path_prefix, "artifacts.js")