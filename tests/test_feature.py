import io

import pytest

from superobject.feature import (
    DEFAULT_EXCLUDED_FIELDS,
    GEOM_EXCLUDED_FIELDS,
    FeatureDefError,
    Field,
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


def _source():
    return {
        "name": "eo_connector_point_inst",
        "external_name": "Connector point",
        "fields": [
            {"name": "id", "external_name": "Id", "type": "integer"},
            {"name": "myw_change_type", "external_name": "Change", "type": "string"},
            {"name": "location", "external_name": "Location", "type": "point"},
            {"name": "owner", "external_name": "Owner", "type": "reference"},
        ],
        "groups": [],
    }


def _compose():
    return {
        "name": "eo_cable",
        "external_name": "Cable",
        "fields": [
            {"name": "id", "external_name": "Id", "type": "integer"},
            {"name": "label", "external_name": "Label & code", "type": "string(50)"},
            {"name": "route", "external_name": "Route", "type": "linestring"},
            {"name": "myw_delta", "external_name": "Delta", "type": "string"},
            {"name": "segments", "external_name": "Segments", "type": "reference_set"},
        ],
        "groups": [],
    }


def test_is_field_exists():
    source = _source()
    assert is_field_exists(source, "owner") is True
    assert is_field_exists(source, "calc__eo_cable__id") is False


def test_add_field_appends_calculated_field():
    source = _source()
    add_field(source, "calc__eo_cable__id", "Id", "integer")
    assert source["fields"][-1] == {
        "name": "calc__eo_cable__id",
        "external_name": "Id",
        "type": "integer",
        "value": "method(calc__eo_cable__id)",
    }
    assert list(source["fields"][-1]) == ["name", "external_name", "type", "value"]
    assert is_field_exists(source, "calc__eo_cable__id")


def test_add_field_without_fields_key():
    with pytest.raises(KeyError):
        add_field({"name": "x"}, "a", "A", "string")


def test_update_field_changes_every_match():
    source = _source()
    source["fields"].append({"name": "owner", "external_name": "Other", "type": "string"})
    update_field(source, "owner", "New owner", "string(10)")
    owners = [f for f in source["fields"] if f["name"] == "owner"]
    assert len(owners) == 2
    for field in owners:
        assert field["external_name"] == "New owner"
        assert field["type"] == "string(10)"
        assert field["value"] == "method(owner)"
    assert source["fields"][0] == {"name": "id", "external_name": "Id", "type": "integer"}


def test_groups_add_and_exist():
    source = _source()
    assert is_group_exists(source, "Default") is False
    add_group(source, "Default", ["id", "owner"])
    assert is_group_exists(source, "Default") is True
    assert source["groups"] == [
        {"name": "Default", "visible": True, "expanded": False, "fields": ["id", "owner"]}
    ]


def test_update_group_only_first_match():
    source = _source()
    add_group(source, "Cable", ["a"])
    add_group(source, "Cable", ["b"])
    update_group(source, "Cable", ["x", "y"])
    assert source["groups"][0]["fields"] == ["x", "y"]
    assert source["groups"][1]["fields"] == ["b"]


def test_update_group_missing_is_noop():
    source = _source()
    add_group(source, "Default", ["id"])
    update_group(source, "Cable", ["x"])
    assert source["groups"][0]["fields"] == ["id"]


def test_get_fields_default_exclusions():
    fields = get_fields(_compose())
    assert fields == [
        Field("eo_cable", "id", "Id", "integer"),
        Field("eo_cable", "label", "Label & code", "string(50)"),
    ]


def test_get_fields_geometry_exclusions_keep_references():
    names = [f.name for f in get_fields(_compose(), GEOM_EXCLUDED_FIELDS)]
    assert names == ["id", "label", "segments"]


def test_get_fields_empty_exclusion_skips_only_myw():
    names = [f.name for f in get_fields(_compose(), [])]
    assert names == ["id", "label", "route", "segments"]


def test_excluded_types_drop_fields_by_type():
    feature = {
        "name": "eo_all",
        "fields": [
            {"name": f"f_{kind}", "external_name": kind, "type": kind}
            for kind in ["reference_set", "reference", "linestring", "point", "polygon", "integer"]
        ],
    }
    default_names = [f.name for f in get_fields(feature, DEFAULT_EXCLUDED_FIELDS)]
    assert default_names == ["f_integer"]
    assert [f.name for f in get_fields(feature)] == default_names
    geom_names = [f.name for f in get_fields(feature, GEOM_EXCLUDED_FIELDS)]
    assert geom_names == ["f_reference_set", "f_reference", "f_integer"]


def test_read_feature_def_keeps_order():
    text = '{"name": "eo_cable", "zeta": 1, "alpha": [], "fields": []}'
    feature = read_feature_def(io.StringIO(text))
    assert list(feature) == ["name", "zeta", "alpha", "fields"]
    assert feature["zeta"] == 1


def test_read_feature_def_accepts_bytes():
    feature = read_feature_def(io.BytesIO(b'{"name": "eo_cable"}'))
    assert feature == {"name": "eo_cable"}


def test_read_feature_def_invalid_json():
    with pytest.raises(FeatureDefError, match="failed to unmarshal feature definition"):
        read_feature_def(io.StringIO("{not json"))


def test_read_feature_def_not_object():
    with pytest.raises(FeatureDefError):
        read_feature_def(io.StringIO("[1, 2]"))


def test_write_feature_def_round_trip_and_format():
    compose = _compose()
    out = io.StringIO()
    write_feature_def(out, compose)
    text = out.getvalue()
    assert text.startswith('{\n  "name": "eo_cable",\n')
    assert text.endswith("}\n")
    assert "Label & code" in text
    assert "\\u0026" not in text
    assert read_feature_def(io.StringIO(text)) == compose


def test_write_feature_def_keeps_non_ascii():
    out = io.StringIO()
    write_feature_def(out, {"name": "kabel é"})
    assert out.getvalue() == '{\n  "name": "kabel é"\n}\n'


def test_get_method_body():
    body = get_method_body("calc__eo_cable__id", "eo_cable", "id")
    assert body == (
        "\n"
        "\t/**\n"
        "\t Method for calculated field. \n"
        "\t @returns {any} value of field id from feature eo_cable\n"
        "\t */\n"
        "    async calc__eo_cable__id(){\n"
        '        return await this.getSuperObjectFieldValue("eo_cable", "id");\n'
        "    }\n"
    )


def test_compose_flow_from_definitions():
    source_text = io.StringIO()
    write_feature_def(source_text, _source())
    compose_text = io.StringIO()
    write_feature_def(compose_text, _compose())
    s_obj = read_feature_def(io.StringIO(source_text.getvalue()))
    co = read_feature_def(io.StringIO(compose_text.getvalue()))

    methods = []
    for f in get_fields(co):
        calc = f"calc__{f.feature_name}__{f.name}"
        add_field(s_obj, calc, f.external_name, f.type)
        methods.append(get_method_body(calc, f.feature_name, f.name))

    names = [field["name"] for field in s_obj["fields"]]
    assert names[-2:] == ["calc__eo_cable__id", "calc__eo_cable__label"]
    joined = "".join(methods)
    assert joined.count("async calc__eo_cable__") == 2
    result = io.StringIO()
    write_feature_def(result, s_obj)
    assert read_feature_def(io.StringIO(result.getvalue())) == s_obj