# cosy

Tools for working with layered configuration: deep merging of configuration
values, resolution of `include` and `extends` directives across files, and
validation against a small schema language that warns about deprecated fields
and suggests corrections for misspelled keys.

Configuration values are plain Python data: `dict` for objects (key order is
kept), `list` for arrays, and `str`, `int`, `float`, `bool` or `None` for
scalars.

## Installation

```
pip install .
```

## Merging

`cosy.merge.merge(base, override)` deep-merges `override` into `base` and
returns the result:

- when both are dicts, `base` is updated in place key by key, and nested
  dicts are merged recursively;
- arrays are replaced, never concatenated;
- in every other case (scalars, differing types) `override` is returned.

```python
from cosy.merge import merge

base = {"server": {"host": "0.0.0.0", "port": 8080}, "debug": False}
merge(base, {"server": {"port": 3000}, "debug": True})
# base == {"server": {"host": "0.0.0.0", "port": 3000}, "debug": True}
```

## Includes and extends

An object may name other files with two directives:

- `extends: "base.cosy"` supplies the deepest defaults;
- `include: "mixin.cosy"` is merged on top of them;
- the object's own keys override both.

`cosy.include.resolve(value, base_path, parse)` resolves these directives in
every object within `value`, including objects nested in other objects and
in arrays. Files are read as UTF-8 relative to `base_path`; the directives of
a loaded file are resolved relative to that file's own directory. `parse` is
any callable that turns a file's text into a configuration value, so the
file syntax is up to you. Dicts are updated in place and the resolved value
is also returned. The directive keys are removed from the result.

A directive whose value is not a string, or a file that does not hold an
object, raises `InvalidIncludeTargetError`. Nesting is limited to a depth of
10 (`cosy.include.MAX_DEPTH`), which also stops include cycles with a
`RecursionLimitError`.

`cosy.load.load_and_merge(paths, parse)` loads several files in order,
resolves the directives in each relative to its own directory, and merges
them so that later files win. With no paths it returns `{}`.

```python
import json
from cosy.load import load_and_merge

config = load_and_merge(["base.json", "local.json"], json.loads)
```

## Schema validation

A schema is itself a configuration value:

- a string names a type: `"string"`, `"integer"`, `"float"`, `"number"`
  (integer or float), `"boolean"` (or `"bool"`), `"null"` or `"any"`;
- an object describes required fields; keys not in the schema are reported,
  with a "did you mean" hint when a schema key is within two edits;
- a one-element array describes every item of an array;
- `{"type": ..., "optional": True, "deprecated": "message"}` marks a field
  as optional or deprecated; a deprecated field that is present gives a
  warning.

`cosy.schema.validate(instance, schema)` returns a list of `ValidationItem`s,
each with a `level` (`ValidationLevel.ERROR` or `ValidationLevel.WARNING`), a
`path` such as `$.list[1]`, and a `message`. An empty list means the instance
is valid. A malformed schema (an unknown type name, an array schema without
exactly one element, or a schema value of another kind) raises `SchemaError`,
whose `item` attribute holds the finding.

```python
from cosy.schema import validate

schema = {"server": {"host": "string", "port": "integer"}}
for item in validate({"server": {"host": "localhost", "prt": 8080}}, schema):
    print(item)
# [Error at $.server] Missing required field 'port'
# [Error at $.server] Unknown field 'prt'; did you mean 'port'?
```

`cosy.schema.type_name(value)` gives the type name used in messages
(`"null"`, `"boolean"`, `"integer"`, `"float"`, `"string"`, `"array"`,
`"object"`).

The edit-distance helpers behind the hints are available as
`cosy.suggest.levenshtein(a, b)` and
`cosy.suggest.find_best_match(target, candidates, max_dist=2)`; on ties the
earliest candidate wins.

## Errors

The errors the package raises derive from `cosy.errors.CosyError`, which
carries a `message` and, where known, a `line` and `column` (0 otherwise).
A file that cannot be read raises `CosyIOError`; directive problems raise
`RecursionLimitError` or `InvalidIncludeTargetError`, both subclasses of
`IncludeError`; a malformed schema raises `cosy.schema.SchemaError`.
Exceptions raised by the `parse` callable you supply are passed through
unchanged.

## What this package does not do

The package has no configuration syntax of its own: it neither parses nor
writes text, so reading files always needs a `parse` callable, and turning
values back into text is left to you. There is no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```