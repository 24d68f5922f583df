"""BSON codec, connection modes, listener metrics and TLS context helpers."""

__version__ = "0.1.0"

__all__ = ["document", "metrics", "modes", "primitives", "scalars", "tag", "tls", "values"]