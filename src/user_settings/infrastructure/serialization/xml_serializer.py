"""XML serializer — implements SerializerPort with lxml and pydantic.

Layout of a serialized settings object::

    <?xml version='1.0' encoding='utf-8'?>
    <EndpointSettings xmlns="urn:user-settings:my_app.settings">
      <url>https://example.org/odata</url>
      <timeout type="int">30</timeout>
      <proxy nil="true"/>
      <headers kind="map">
        <entry key="Accept">application/json</entry>
      </headers>
      <scopes kind="list">
        <item>read</item>
      </scopes>
      <auth kind="object">
        <user>alice</user>
      </auth>
    </EndpointSettings>

Fields are written in declaration order; a field or extra whose name is not
a valid XML name is written as ``<entry key="...">``. Bytes are base64 text
tagged ``type="bytes"``. Loading hands the decoded tree to a
pydantic ``TypeAdapter`` for the requested type, so anything pydantic can
validate (models, dataclasses, enums, dates) round-trips.
"""

from __future__ import annotations

import base64
import dataclasses
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from lxml import etree
from pydantic import BaseModel, TypeAdapter
from pydantic_core import PydanticSerializationError, to_jsonable_python

from user_settings.domain.errors import SerializationError
from user_settings.domain.ports.serializer_port import SerializerPort

T = TypeVar("T")

NAMESPACE_PREFIX = "urn:user-settings:"

_NIL = "nil"
_KIND = "kind"
_TYPE = "type"
_ENTRY = "entry"

_XML_NAME = re.compile(r"[^\W\d][\w.\-]*")
_NOT_NAME_CHAR = re.compile(r"[^\w.\-]")


def namespace_for(settings_type: type) -> str:
    """XML namespace of the root element written for *settings_type*."""
    return f"{NAMESPACE_PREFIX}{settings_type.__module__}"


def root_name_for(settings_type: type) -> str:
    """Local name of the root element written for *settings_type*.

    Characters not allowed in XML names are replaced, so parametrized
    generics such as ``Box[int]`` become ``Box_int_``.
    """
    name = _NOT_NAME_CHAR.sub("_", settings_type.__name__)
    return name if _XML_NAME.fullmatch(name) else f"_{name}"


def _is_record(value: Any) -> bool:
    return isinstance(value, BaseModel) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    )


def _record_fields(value: Any) -> list[tuple[str, Any]]:
    if isinstance(value, BaseModel):
        fields = [
            (info.alias or name, getattr(value, name))
            for name, info in type(value).model_fields.items()
        ]
        fields.extend((value.model_extra or {}).items())
        return fields
    return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]


class XmlSettingsSerializer(SerializerPort):
    """Concrete implementation of :class:`SerializerPort`.

    The parser used for loading never resolves entities, never loads a DTD
    and never touches the network; documents carrying a DOCTYPE are
    rejected outright.
    """

    def __init__(self, *, pretty_print: bool = True) -> None:
        self._pretty_print = pretty_print

    # -- Writing -------------------------------------------------------------

    def serialize(self, value: Any) -> bytes:
        if not _is_record(value):
            raise SerializationError(
                f"Cannot serialize {type(value).__name__}: expected a pydantic model or dataclass"
            )

        settings_type = type(value)
        try:
            root = etree.Element(
                etree.QName(namespace_for(settings_type), root_name_for(settings_type)),
                nsmap={None: namespace_for(settings_type)},
            )
            self._write_record(root, value)
            return etree.tostring(
                root,
                xml_declaration=True,
                encoding="utf-8",
                pretty_print=self._pretty_print,
            )
        except (ValueError, TypeError, PydanticSerializationError) as exc:
            raise SerializationError(f"Cannot serialize {settings_type.__name__}: {exc}") from exc

    def _write_record(self, element: etree._Element, value: Any) -> None:
        for key, field_value in _record_fields(value):
            if _XML_NAME.fullmatch(key):
                child = self._child(element, key)
            else:
                child = self._child(element, _ENTRY)
                child.set("key", key)
            self._write_value(child, field_value)

    def _write_value(self, element: etree._Element, value: Any) -> None:
        if value is None:
            element.set(_NIL, "true")
        elif _is_record(value):
            element.set(_KIND, "object")
            self._write_record(element, value)
        elif isinstance(value, Mapping):
            element.set(_KIND, "map")
            for key, item in value.items():
                entry = self._child(element, _ENTRY)
                entry.set("key", str(to_jsonable_python(key)))
                self._write_value(entry, item)
        elif isinstance(value, (list, tuple, set, frozenset)):
            element.set(_KIND, "list")
            for item in value:
                self._write_value(self._child(element, "item"), item)
        elif isinstance(value, (bytes, bytearray)):
            element.set(_TYPE, "bytes")
            element.text = base64.b64encode(value).decode("ascii")
        elif isinstance(value, Enum):
            self._write_value(element, value.value)
        elif isinstance(value, bool):
            element.set(_TYPE, "bool")
            element.text = "true" if value else "false"
        elif isinstance(value, int):
            element.set(_TYPE, "int")
            element.text = str(value)
        elif isinstance(value, float):
            element.set(_TYPE, "float")
            element.text = repr(value)
        elif isinstance(value, str):
            element.text = value
        else:
            # Dates, paths, decimals, ... as pydantic would emit them in JSON
            self._write_value(element, to_jsonable_python(value))

    @staticmethod
    def _child(parent: etree._Element, tag: str) -> etree._Element:
        return etree.SubElement(parent, etree.QName(etree.QName(parent).namespace, tag))

    # -- Reading -------------------------------------------------------------

    def deserialize(self, data: bytes, settings_type: type[T]) -> T:
        parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
            dtd_validation=False,
            huge_tree=False,
        )
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as exc:
            raise SerializationError(f"Malformed settings document: {exc}") from exc

        if root.getroottree().docinfo.doctype:
            raise SerializationError("Settings documents must not declare a DOCTYPE")

        expected = etree.QName(namespace_for(settings_type), root_name_for(settings_type))
        if root.tag != expected.text:
            raise SerializationError(
                f"Expected root element {expected.text}, found {root.tag}"
            )

        tree = self._read_record(root)
        return TypeAdapter(settings_type).validate_python(tree)

    def _read_record(self, element: etree._Element) -> dict[str, Any]:
        return {_record_key(child): self._read_value(child) for child in _elements(element)}

    def _read_value(self, element: etree._Element) -> Any:
        if element.get(_NIL) == "true":
            return None

        kind = element.get(_KIND)
        if kind == "object":
            return self._read_record(element)
        if kind == "map":
            return {child.get("key"): self._read_value(child) for child in _elements(element)}
        if kind == "list":
            return [self._read_value(child) for child in _elements(element)]
        if kind is not None:
            raise SerializationError(f"Unknown element kind {kind!r} on <{element.tag}>")

        text = element.text or ""
        scalar_type = element.get(_TYPE)
        if scalar_type is None:
            return text
        if scalar_type == "bool":
            if text not in ("true", "false"):
                raise SerializationError(f"Invalid boolean {text!r} on <{element.tag}>")
            return text == "true"
        try:
            if scalar_type == "int":
                return int(text)
            if scalar_type == "float":
                return float(text)
            if scalar_type == "bytes":
                return base64.b64decode(text, validate=True)
        except ValueError as exc:
            raise SerializationError(f"Invalid {scalar_type} {text!r} on <{element.tag}>") from exc
        raise SerializationError(f"Unknown scalar type {scalar_type!r} on <{element.tag}>")


def _elements(element: etree._Element) -> list[etree._Element]:
    # Skip comments and processing instructions
    return [child for child in element if isinstance(child.tag, str)]


def _record_key(child: etree._Element) -> str:
    # Field names that are not XML names are written as <entry key="...">
    local = etree.QName(child).localname
    if local == _ENTRY and "key" in child.attrib:
        return child.get("key")
    return local
