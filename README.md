# baots

Building blocks for generating TypeScript command-line projects that run on
Bun and use the boune CLI library.

## What is in the package

- **Fragments and the builder** (`baots.fragments`): the fragment types
  `Line`, `Raw`, `JsDoc` and `Block`, and `CodeBuilder`, which writes text
  with two-space indentation by default (`line`, `raw`, `push_blank`,
  `indent`, `dedent`, `jsdoc`, `emit`, `apply_fragment`, `build`).
- **Syntax builders** (`baots.ast`):
  - `baots.ast.imports.Import` and `baots.ast.exports.Export`
  - `baots.ast.consts.Const`
  - `baots.ast.fns.Fn` and `Param`
  - `baots.ast.interface.Interface` and `InterfaceField`
  - `baots.ast.types.ObjectType`, `Field`, `TypeAlias` and `Union`
  - `baots.ast.objects.JsObject`, `Property` and `ArrowFn`
  - `baots.ast.chain.MethodChain`

  Each builder's methods return the builder, so calls can be chained; most
  offer `build()` for a string and `to_fragments()` for use with
  `CodeBuilder.emit` or `CodeFile.add`.
- **File assembly** (`baots.code_file`): `CodeFile` lays out imports, body
  elements and exports, separated by blank lines; `RawCode` adds verbatim
  code.
- **Project files** (`baots.files`): `CliTs`, `CommandTs`, `ContextTs`,
  `HandlerTs`, `IndexTs`, `PackageJson`, `TsConfig` and `GitIgnore`, all
  subclasses of `baots.files.base.GeneratedFile`. Each knows its `path()`
  under a project directory, can `render()` its content, and can `write()`
  itself, returning a `WriteResult` (`WRITTEN` or `SKIPPED`).
- **Adapters** (`baots.adapters`): `BouneAdapter` builds argument and option
  chains and the async action handler; `BunSqliteAdapter` produces
  `bun:sqlite` imports, connection code and options. `toml_to_ts_literal`
  renders strings, numbers and booleans as TypeScript literals.
- **Naming and types**: `to_camel_case`, `to_pascal_case`, `to_kebab_case`,
  `NamingConvention` and the ready-made `TS_NAMING` in `baots.naming`;
  `ArgType`, `DatabaseType`, `ContextFieldType` and `TypeScriptTypeMapper`
  in `baots.type_mapper`.

## Installation

```
pip install baots
```

## Example

```python
from baots.ast.imports import Import
from baots.ast.exports import Export
from baots.code_file import CodeFile, RawCode

source = (
    CodeFile()
    .import_(Import("boune").named("defineCommand"))
    .add(RawCode("const cmd = defineCommand({});"))
    .export(Export().named("cmd"))
    .render()
)
print(source)
```

Output:

```
import { defineCommand } from "boune";

const cmd = defineCommand({});

export { cmd };
```

Writing a project file:

```python
from pathlib import Path
from baots.files.tsconfig import TsConfig

result = TsConfig().write(Path("my-cli"))
```

`CliTs`, `CommandTs` and `ContextTs` are always overwritten. `HandlerTs`,
`IndexTs`, `PackageJson`, `TsConfig` and `GitIgnore` are written only when
the file does not exist yet; otherwise `write()` returns
`WriteResult.SKIPPED`.

## What it does not do

The package provides the pieces, not a finished tool. It has no command to
run, does not read a project manifest, and has no single generator that
walks a tree of commands and writes a whole project; you create and write
each file yourself. It also does not write a `bao.toml` for the generated
project.

## Running the tests

```
pip install -e ".[test]"
pytest
```