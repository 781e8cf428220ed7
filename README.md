# superobject

Tools for building "super object" feature definitions: a source feature
definition is extended with calculated fields taken from another (compose)
definition, and the JavaScript classes that serve those features are generated.

## Installation

    pip install .

## Combining feature definitions

    so-generator --source path/to/source.def --compose path/to/compose.def --dest path/to/result.def

The single-dash forms `-source`, `-compose` and `-dest` are accepted as well.
All three options are required; if any is missing the help text is printed
to standard error and the command exits with status 1.

The command:

- adds a `Default` group listing the source's own fields, leaving out `myw_`
  fields and `linestring`, `point` and `polygon` fields, if the source does
  not have a `Default` group yet;
- for every field of the compose definition (skipping `myw_` fields and
  fields of type `reference_set`, `reference`, `linestring`, `point` or
  `polygon`) adds a calculated field named `calc__<feature>__<field>` whose
  value is `method(<that name>)`, or updates it if the source already has it;
- adds a group named after the compose definition's `external_name` that
  lists those calculated fields, or replaces the field list of that group if
  it already exists;
- writes the combined definition to `--dest` as JSON indented by two spaces;
- appends the JavaScript method bodies for the calculated fields that were
  updated (not those newly added) to `<dest>_methods.txt`, creating that file
  if it is not there.

Read errors are reported on standard error with exit status 1.

## Generating JavaScript classes

    js-generator [--directory DIR]

writes one `stedSuperObject<Name>.js` class file for each of the built-in
super-object configurations, plus a `setDM.js` that registers them all in
the data model. Files go to the current directory unless `-d`/`--directory`
names another.

## Library use

```python
from superobject.feature import read_feature_def, get_fields, add_field, write_feature_def
from superobject.so_generator import read_def, combine
from superobject.js_generator import Config, Relation, CONFIGS, render_class, generate
```

`superobject.feature`:

- `read_feature_def(stream)` parses a definition from a text or binary stream
  into a dict, keeping key order; `write_feature_def(stream, feature)` writes
  it back to a text stream. Failures raise `FeatureDefError`.
- `get_fields(feature_def, excluded=None)` returns `Field` records
  (`feature_name`, `name`, `external_name`, `type`), skipping `myw_` fields
  and the excluded types (`DEFAULT_EXCLUDED_FIELDS` when `excluded` is
  `None`; `GEOM_EXCLUDED_FIELDS` holds the geometry types only).
- `is_field_exists`, `add_field`, `update_field`, `is_group_exists`,
  `add_group` and `update_group` inspect and edit the `fields` and `groups`
  lists of a definition.
- `get_method_body(method_name, feature_name, field_name)` renders the
  JavaScript accessor for a calculated field.

`superobject.so_generator`: `read_def(path)` reads a definition file, and
`combine(source, compose)` extends `source` in place as described above and
returns the method bodies for the updated fields.

`superobject.js_generator`: `render_class(config)` and
`render_data_model(config)` render one `Config`, and
`generate(configs=CONFIGS, directory=".")` writes the files for a list of
them and returns their paths.

## Limits

The super-object configurations used by `js-generator` are fixed in
`CONFIGS`; the command has no option to read them from a file. Other
configurations can be rendered only through `generate` from Python.