"""Where: src/vlcremote/platform/vlc/decoding.py
What: Generic JSON/XML decoding of response bodies into typed records.
Why: Keep parse failures in one place and report them as ``DecodeError``.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, Self, TypeVar, cast

from vlcremote.domain.errors import DecodeError


class JSONRecord(Protocol):
    """Record type buildable from a decoded JSON object."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self: ...


class XMLRecord(Protocol):
    """Record type buildable from an XML root element."""

    ROOT_TAG: ClassVar[str]

    @classmethod
    def from_element(cls, root: ET.Element) -> Self: ...


J = TypeVar("J", bound=JSONRecord)
X = TypeVar("X", bound=XMLRecord)


def decode_json(raw: bytes, shape: type[J]) -> J:
    """Decode ``raw`` as a JSON object and build ``shape`` from it.

    Raises:
        DecodeError: If the body is not JSON, not an object, nested too
            deeply, or a field has the wrong type for ``shape``.
    """

    try:
        data: object = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"unable to parse JSON as {shape.__name__}: {exc}") from exc

    if not isinstance(data, dict):
        raise DecodeError(
            f"expected a JSON object for {shape.__name__}, got {type(data).__name__}"
        )

    try:
        return shape.from_dict(cast(dict[str, Any], data))
    except (TypeError, ValueError, RecursionError) as exc:
        raise DecodeError(f"unable to decode {shape.__name__}: {exc}") from exc


def decode_xml(raw: bytes, shape: type[X]) -> X:
    """Decode ``raw`` as an XML document rooted at ``shape.ROOT_TAG``."""

    try:
        root = ET.fromstring(raw)
    except ET.ParseError as exc:
        raise DecodeError(f"unable to parse XML as {shape.__name__}: {exc}") from exc

    if root.tag != shape.ROOT_TAG:
        raise DecodeError(
            f"expected <{shape.ROOT_TAG}> root for {shape.__name__}, got <{root.tag}>"
        )

    try:
        return shape.from_element(root)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"unable to decode {shape.__name__}: {exc}") from exc


__all__ = ["JSONRecord", "XMLRecord", "decode_json", "decode_xml"]
