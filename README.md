# fzmeta

`fzmeta` is a small library of building blocks for tooling that reads
`.fz_meta` declaration files and writes C tables: ASCII text helpers, path
helpers, a parser for `--key value` / `-flag` command lines, and small vector
and matrix types.

## Modules

### `fzmeta.text`

String searching, splitting and parsing, and ASCII character classes.

```python
from fzmeta import text

text.find_last("a/b/c", "/")          # 3 (None when absent)
text.split_once("key=value", "=")     # ["key", "=value"]
text.int_from_string("42")            # 42
text.float_from_string("3.25")        # 3.25
text.bool_from_string("true")         # True
text.is_digit("0")                    # False: only 1 to 9 count
```

`int_from_string`, `float_from_string` and `bool_from_string` raise
`ValueError` on input they do not accept; `split_once` raises `ValueError`
when the separator is not a single character. Also available: `is_alpha`,
`is_alphanum`, `is_symbol`, `is_space`, `to_upper`, `to_lower`.

### `fzmeta.paths`

```python
from fzmeta import paths

paths.has_extension("colors.fz_meta", "FZ_META")    # True, case ignored
paths.file_name_no_ext("dir/colors.fz_meta")        # "colors"
paths.join_path("out", "colors")                    # "out" + os.sep + "colors"
paths.collect_files("some/directory")               # every file below it
```

`normalize_path` turns every `/` and `\` into the platform separator;
`file_name`, `dirname` and `current_directory_name` pick parts of a path.
`collect_files` raises `NotADirectoryError` when given something other than
a directory.

### `fzmeta.command_line`

```python
from fzmeta.command_line import parse_command_line

parse_command_line('--input_file "a b.fz_meta" -verbose')
# [CommandLineArg(key='input_file', value='a b.fz_meta', is_flag=False),
#  CommandLineArg(key='verbose', value='verbose', is_flag=True)]
```

A token starting with `-` is a key; the following token is its value unless
the line ends or that token starts with `-`, in which case the key is a flag.
Other tokens are ignored, and at most 16 arguments are returned.
`split_tokens`, `strip_quotes` and `strip_leading_dashes` are available on
their own.

### `fzmeta.vectors`

Frozen dataclasses `Vec2`, `Vec3` and `Vec4` with addition, subtraction,
`scale`, `dot`, `length`, `normalize`, `distance` and `lerp`; `Vec3` and
`Vec4` also support component-wise `*` and `/`. `Vec3` adds `cross`,
`scale_xyz`, `rotate_by_axis` and `angle`. Scalar helpers: `lerp`,
`normalize`, `remap`, `wrap`.

```python
from fzmeta.vectors import Vec3

Vec3(1, 0, 0).cross(Vec3(0, 1, 0))   # Vec3(x=0, y=0, z=1)
```

### `fzmeta.matrices`

`Mat4` (16 values, translation in `m[12..14]`) with `identity`, `diagonal`,
`@` for multiplication, `transpose`, `transform_vec3`, `transform_vec4` and
`format`. Constructors: `translate`, `scale`, `rotate_axis`, `rotate_x`,
`rotate_y`, `rotate_z`, `rotate_xyz`, `rotate_zyx`, `frustum`, `perspective`,
`orthographic`, `look_at`, and `unproject` to map a point back through a
projection and view.

```python
from fzmeta.matrices import translate
from fzmeta.vectors import Vec4

translate(1, 2, 3).transform_vec4(Vec4(0, 0, 0, 1))   # Vec4(1.0, 2.0, 3.0, 1.0)
```

## What this package does not do

It does not read `.fz_meta` files, tokenise them or write the generated C
enum and string tables, and it installs no command to do so. It has no
quaternion or transform types.

## Tests

```
pip install -e .[test]
pytest
```