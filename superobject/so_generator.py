"""Combination of a compose feature's fields into a super-object definition."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Sequence

from superobject.feature import (
    GEOM_EXCLUDED_FIELDS,
    FeatureDefError,
    add_field,
    add_group,
    get_fields,
    get_method_body,
    is_field_exists,
    is_group_exists,
    read_feature_def,
    update_field,
    update_group,
    write_feature_def,
)

DEFAULT_GROUP = "Default"


def read_def(path: str | Path) -> dict[str, Any]:
    """Read a feature definition file."""
    with open(path, "rb") as stream:
        try:
            return read_feature_def(stream)
        except FeatureDefError as exc:
            raise FeatureDefError(
                f"failed to read feature definition from {path}: {exc}"
            ) from exc


def combine(source: dict[str, Any], compose: dict[str, Any]) -> str:
    """Add the compose feature's fields to source as calculated fields.

    Adds a default group to source if it has none, and a group named after the
    compose feature. Returns the method bodies for fields that already existed.
    """
    if not is_group_exists(source, DEFAULT_GROUP):
        default_fields = [f.name for f in get_fields(source, GEOM_EXCLUDED_FIELDS)]
        add_group(source, DEFAULT_GROUP, default_fields)

    methods = []
    field_names = []
    for field in get_fields(compose):
        calc_name = f"calc__{field.feature_name}__{field.name}"
        if is_field_exists(source, calc_name):
            update_field(source, calc_name, field.external_name, field.type)
            methods.append(get_method_body(calc_name, field.feature_name, field.name))
        else:
            add_field(source, calc_name, field.external_name, field.type)
        field_names.append(calc_name)

    group_name = compose["external_name"]
    if is_group_exists(source, group_name):
        update_group(source, group_name, field_names)
    else:
        add_group(source, group_name, field_names)
    return "".join(methods)


def main(argv: Sequence[str] | None = None) -> int:
    """Combine two definitions and write the result and its methods."""
    parser = argparse.ArgumentParser(
        prog="so-generator", description="Combine superobject definitions."
    )
    parser.add_argument("-source", "--source", default="", help="Path to source superobject def file")
    parser.add_argument("-compose", "--compose", default="", help="Path to compose superobject def file")
    parser.add_argument(
        "-dest",
        "--dest",
        default="",
        help="Path to destination of superobject with combined fields. "
        "Output file will be created if it does not exist",
    )
    args = parser.parse_args(argv)
    if not (args.source and args.compose and args.dest):
        parser.print_help(sys.stderr)
        return 1

    try:
        source = read_def(args.source)
        compose = read_def(args.compose)
    except (OSError, FeatureDefError) as exc:
        print(exc, file=sys.stderr)
        return 1

    methods = combine(source, compose)

    try:
        with open(args.dest, "w", encoding="utf-8") as out:
            write_feature_def(out, source)
    except OSError as exc:
        print(f"failed to open file {args.dest}: {exc}", file=sys.stderr)
        return 1
    except FeatureDefError as exc:
        print(exc, file=sys.stderr)
        return 1

    with open(f"{args.dest}_methods.txt", "a", encoding="utf-8") as methods_file:
        methods_file.write(methods)
    return 0