"""VLC web interface client package.

Exposes the ``VLC`` facade together with the transport it is built on.
"""

from __future__ import annotations

from .client import VLC, client_from_config, create_client
from .decoding import decode_json, decode_xml
from .http_client import HTTPTransport, RequestAuth, Transport
from .query import build_endpoint

__all__ = [
    "HTTPTransport",
    "RequestAuth",
    "Transport",
    "VLC",
    "build_endpoint",
    "client_from_config",
    "create_client",
    "decode_json",
    "decode_xml",
]
