"""Editing of feature definitions and generation of calculated-field methods."""

from __future__ import annotations

import json
from dataclasses import dataclass
from string import Template
from typing import IO, Any, Iterable

DEFAULT_EXCLUDED_FIELDS = ("reference_set", "reference", "linestring", "point", "polygon")
GEOM_EXCLUDED_FIELDS = ("linestring", "point", "polygon")

_METHOD_TEMPLATE = Template(
    "\n"
    "\t/**\n"
    "\t Method for calculated field. \n"
    "\t @returns {any} value of field ${field_name} from feature ${feature_name}\n"
    "\t */\n"
    "    async ${method_name}(){\n"
    '        return await this.getSuperObjectFieldValue("${feature_name}", "${field_name}");\n'
    "    }\n"
)


class FeatureDefError(Exception):
    """Raised when a feature definition cannot be read or written."""


@dataclass(frozen=True)
class Field:
    """A field taken from a feature definition."""

    feature_name: str
    name: str
    external_name: str
    type: str


def _calc_value(field_name: str) -> str:
    return f"method({field_name})"


def is_field_exists(feature_def: dict[str, Any], field_name: str) -> bool:
    """Return True if a field of that name is in the definition."""
    return any(field.get("name") == field_name for field in feature_def["fields"])


def add_field(
    feature_def: dict[str, Any], field_name: str, external_name: str, field_type: str
) -> None:
    """Append a calculated field to the definition."""
    feature_def["fields"].append(
        {
            "name": field_name,
            "external_name": external_name,
            "type": field_type,
            "value": _calc_value(field_name),
        }
    )


def update_field(
    feature_def: dict[str, Any], field_name: str, external_name: str, field_type: str
) -> None:
    """Update every field of that name to a calculated field."""
    for field in feature_def["fields"]:
        if field.get("name") == field_name:
            field["external_name"] = external_name
            field["type"] = field_type
            field["value"] = _calc_value(field_name)


def is_group_exists(feature_def: dict[str, Any], group_name: str) -> bool:
    """Return True if a group of that name is in the definition."""
    return any(group.get("name") == group_name for group in feature_def["groups"])


def add_group(feature_def: dict[str, Any], group_name: str, fields: Iterable[str]) -> None:
    """Append a visible, collapsed group holding the given field names."""
    feature_def["groups"].append(
        {
            "name": group_name,
            "visible": True,
            "expanded": False,
            "fields": list(fields),
        }
    )


def update_group(feature_def: dict[str, Any], group_name: str, fields: Iterable[str]) -> None:
    """Replace the field names of the first group with that name."""
    for group in feature_def["groups"]:
        if group.get("name") == group_name:
            group["fields"] = list(fields)
            break


def get_fields(
    feature_def: dict[str, Any], excluded: Iterable[str] | None = None
) -> list[Field]:
    """Return the fields of a definition, skipping "myw_" fields and excluded types."""
    excluded_types = set(DEFAULT_EXCLUDED_FIELDS if excluded is None else excluded)
    feature_name = feature_def["name"]
    fields = []
    for field in feature_def["fields"]:
        name = field["name"]
        if name.startswith("myw_"):
            continue
        if field["type"] in excluded_types:
            continue
        fields.append(
            Field(
                feature_name=feature_name,
                name=name,
                external_name=field["external_name"],
                type=field["type"],
            )
        )
    return fields


def read_feature_def(reader: IO[Any]) -> dict[str, Any]:
    """Read a feature definition from a text or binary stream."""
    try:
        data = reader.read()
    except OSError as exc:
        raise FeatureDefError(f"failed to read feature definition: {exc}") from exc
    try:
        feature = json.loads(data)
    except ValueError as exc:
        raise FeatureDefError(f"failed to unmarshal feature definition: {exc}") from exc
    if not isinstance(feature, dict):
        raise FeatureDefError(
            "failed to unmarshal feature definition: top-level value is not an object"
        )
    return feature


def write_feature_def(writer: IO[str], feature: dict[str, Any]) -> None:
    """Write a feature definition as indented JSON followed by a newline."""
    text = json.dumps(feature, indent=2, ensure_ascii=False)
    text = text.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    text = text.replace("\\u0026", "&")
    try:
        writer.write(text + "\n")
    except OSError as exc:
        raise FeatureDefError(f"failed to write feature definition: {exc}") from exc


def get_method_body(method_name: str, feature_name: str, field_name: str) -> str:
    """Return the script method that reads a field of another feature."""
    return _METHOD_TEMPLATE.substitute(
        method_name=method_name, feature_name=feature_name, field_name=field_name
    )