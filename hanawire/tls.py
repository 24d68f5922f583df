"""TLS configuration for the client listener."""

from __future__ import annotations

import os
import ssl


class TLSConfigError(ValueError):
    """Raised when a TLS server context cannot be built."""


def create_server_context(
    cert_file: str | os.PathLike[str] | None,
    key_file: str | os.PathLike[str] | None,
) -> ssl.SSLContext:
    """Build a server-side TLS context from a certificate and a key file."""
    if not cert_file:
        raise TLSConfigError("No path was given for the certificate file for TLS")
    if not key_file:
        raise TLSConfigError("No path was given for the key file for TLS")

    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    try:
        context.load_cert_chain(certfile=cert_file, keyfile=key_file)
    except (OSError, ssl.SSLError) as exc:
        raise TLSConfigError(
            f"Following error occured when loading the x509 key and cert files: {exc}"
        ) from exc
    return context