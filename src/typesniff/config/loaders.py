# topmark:header:start
#
#   project      : TypeSniff
#   file         : loaders.py
#   file_relpath : src/typesniff/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load custom type definitions from TOML.

A configuration document declares extra media types (or overrides for
built-in ones) and labels to remove:

```toml
remove = ["image/vnd.microsoft.icon"]

[types."application/x-acme"]
extensions = ["acme"]
parents = ["application/octet-stream"]

[[types."application/x-acme".magic]]
offset = 0
value = "ACME"

[[types."application/x-acme".magic.children]]
range = [16, 64]
hex = "00 01"
```

Sources, in order of precedence:
    1. an explicit path (``--config``),
    2. ``typesniff.toml`` in the working directory,
    3. ``[tool.typesniff]`` in ``pyproject.toml`` in the working directory.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Applying a document mutates a registry and therefore belongs to
application start-up.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from typesniff.config.keys import Toml
from typesniff.config.logging import TypesniffLogger, get_logger
from typesniff.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION
from typesniff.magic.pattern import MagicPattern
from typesniff.registry.definitions import TypeDefinition

if TYPE_CHECKING:
    from typesniff.registry import TypeRegistry

logger: TypesniffLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(ValueError):
    """Raised when a configuration document is structurally invalid."""


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _nested_table(data: TomlTable, keys: tuple[str, ...]) -> TomlTable:
    node: Any = data
    for key in keys:
        if not isinstance(node, dict):
            return {}
        node = cast("TomlTable", node).get(key, {})
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def discover_config(
    cwd: Path | None = None,
    *,
    explicit: Path | None = None,
) -> tuple[TomlTable, Path | None]:
    """Locate and load the configuration table.

    Args:
        cwd (Path | None): Directory to search; defaults to the current directory.
        explicit (Path | None): Path given by the user; wins over discovery.

    Returns:
        tuple[TomlTable, Path | None]: The configuration table (empty if none
            was found) and the file it came from.
    """
    if explicit is not None:
        if explicit.name == PYPROJECT_FILE_NAME:
            return _nested_table(load_toml_dict(explicit), PYPROJECT_SECTION), explicit
        return load_toml_dict(explicit), explicit

    base = cwd or Path.cwd()
    candidate = base / CONFIG_FILE_NAME
    if candidate.is_file():
        logger.debug("Using configuration %s", candidate)
        return load_toml_dict(candidate), candidate

    pyproject = base / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        table = _nested_table(load_toml_dict(pyproject), PYPROJECT_SECTION)
        if table:
            logger.debug("Using [tool.typesniff] from %s", pyproject)
            return table, pyproject

    return {}, None


# --- Document -> definitions ---


def _string_list(value: Any, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in cast("list[Any]", value)):
        raise ConfigError(f"{where}: expected a string or a list of strings")
    return tuple(cast("list[str]", value))


def _pattern_value(table: TomlTable, where: str) -> bytes:
    if Toml.KEY_HEX in table:
        raw = table[Toml.KEY_HEX]
        if not isinstance(raw, str):
            raise ConfigError(f"{where}.{Toml.KEY_HEX}: expected a string")
        try:
            value = bytes.fromhex(raw)
        except ValueError as exc:
            raise ConfigError(f"{where}.{Toml.KEY_HEX}: invalid hex string ({exc})") from exc
    elif Toml.KEY_VALUE in table:
        raw = table[Toml.KEY_VALUE]
        if not isinstance(raw, str):
            raise ConfigError(f"{where}.{Toml.KEY_VALUE}: expected a string")
        value = raw.encode("utf-8")
    else:
        raise ConfigError(f"{where}: one of '{Toml.KEY_VALUE}' or '{Toml.KEY_HEX}' is required")
    if not value:
        raise ConfigError(f"{where}: pattern value must not be empty")
    return value


def parse_pattern(table: Any, where: str) -> MagicPattern:
    """Build a `MagicPattern` from a TOML table.

    Args:
        table (Any): The ``[[...magic]]`` (or ``children``) table.
        where (str): Location used in error messages.

    Returns:
        MagicPattern: The parsed pattern, including nested children.

    Raises:
        ConfigError: If the table is malformed.
    """
    if not isinstance(table, dict):
        raise ConfigError(f"{where}: expected a table")
    data = cast("TomlTable", table)
    value = _pattern_value(data, where)

    children_raw: Any = data.get(Toml.KEY_CHILDREN, [])
    if not isinstance(children_raw, list):
        raise ConfigError(f"{where}.{Toml.KEY_CHILDREN}: expected an array of tables")
    children = tuple(
        parse_pattern(child, f"{where}.{Toml.KEY_CHILDREN}[{i}]")
        for i, child in enumerate(cast("list[Any]", children_raw))
    )

    if Toml.KEY_RANGE in data:
        bounds: Any = data[Toml.KEY_RANGE]
        if (
            not isinstance(bounds, list)
            or len(cast("list[Any]", bounds)) != 2
            or not all(isinstance(b, int) for b in cast("list[Any]", bounds))
        ):
            raise ConfigError(f"{where}.{Toml.KEY_RANGE}: expected [start, end] integers")
        start, end = cast("list[int]", bounds)
        if start < 0 or end < start:
            raise ConfigError(
                f"{where}.{Toml.KEY_RANGE}: expected 0 <= start <= end, got [{start}, {end}]"
            )
        return MagicPattern.range(start, end, value, children)

    offset: Any = data.get(Toml.KEY_OFFSET, 0)
    if not isinstance(offset, int) or isinstance(offset, bool):
        raise ConfigError(f"{where}.{Toml.KEY_OFFSET}: expected an integer")
    if offset < 0:
        raise ConfigError(f"{where}.{Toml.KEY_OFFSET}: must be >= 0, got {offset}")
    return MagicPattern.fixed(offset, value, children)


def parse_type_definitions(config: TomlTable) -> list[TypeDefinition]:
    """Convert the ``[types]`` section into definitions (document order).

    Raises:
        ConfigError: If a type table is malformed.
    """
    types_raw: Any = config.get(Toml.SECTION_TYPES, {})
    if not isinstance(types_raw, dict):
        raise ConfigError(f"[{Toml.SECTION_TYPES}]: expected a table")

    definitions: list[TypeDefinition] = []
    for label, body in cast("TomlTable", types_raw).items():
        where = f'{Toml.SECTION_TYPES}."{label}"'
        if not isinstance(body, dict):
            raise ConfigError(f"{where}: expected a table")
        entry = cast("TomlTable", body)
        magic_raw: Any = entry.get(Toml.KEY_MAGIC, [])
        if not isinstance(magic_raw, list):
            raise ConfigError(f"{where}.{Toml.KEY_MAGIC}: expected an array of tables")
        patterns = tuple(
            parse_pattern(p, f"{where}.{Toml.KEY_MAGIC}[{i}]")
            for i, p in enumerate(cast("list[Any]", magic_raw))
        )
        description: Any = entry.get(Toml.KEY_DESCRIPTION, "")
        definitions.append(
            TypeDefinition(
                label=label,
                extensions=_string_list(entry.get(Toml.KEY_EXTENSIONS), f"{where}.extensions"),
                parents=_string_list(entry.get(Toml.KEY_PARENTS), f"{where}.parents"),
                patterns=patterns,
                description=str(description),
            )
        )
    return definitions


def apply_config(config: TomlTable, registry: TypeRegistry) -> int:
    """Apply a configuration table to ``registry``.

    Removals are applied first, then each type is extended in document order
    (so a type declared later takes magic priority over earlier ones).

    Args:
        config (TomlTable): Parsed configuration table.
        registry (TypeRegistry): Registry to mutate.

    Returns:
        int: Number of type definitions applied.

    Raises:
        ConfigError: If the document is malformed. The registry is left
            untouched in that case.
    """
    removals = _string_list(config.get(Toml.KEY_REMOVE), Toml.KEY_REMOVE)
    definitions = parse_type_definitions(config)

    for label in removals:
        registry.remove(label)
    for td in definitions:
        registry.extend(
            td.label,
            extensions=td.extensions,
            parents=td.parents,
            patterns=td.patterns,
            description=td.description,
        )
    logger.info("Applied %d custom type(s), removed %d", len(definitions), len(removals))
    return len(definitions)
