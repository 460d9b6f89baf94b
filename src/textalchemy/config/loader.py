# topmark:header:start
#
#   project      : TextAlchemy
#   file         : loader.py
#   file_relpath : src/textalchemy/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TextAlchemy settings from TOML sources.

Sources, lowest to highest precedence:

1. built-in defaults (`Settings()`);
2. the ``[tool.textalchemy]`` table of ``pyproject.toml`` in the working directory;
3. ``textalchemy.toml`` in the working directory (top-level keys);
4. an explicit configuration file (``--config``), either layout.

CLI options are applied on top by the caller via `Settings.merged`.
Parsing is done with `tomlkit`; unknown keys are logged and ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from textalchemy.config.keys import UNBOUNDED_DEPTH_NAMES, Toml
from textalchemy.config.logging import get_logger
from textalchemy.config.model import Settings
from textalchemy.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from textalchemy.core.errors import ConfigError
from textalchemy.core.formats import RenderFormat
from textalchemy.core.values import UNBOUNDED
from textalchemy.templates.types import Audience, TemplateStyle

if TYPE_CHECKING:
    from textalchemy.config.logging import TextAlchemyLogger
    from textalchemy.core.values import Depth

logger: TextAlchemyLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def parse_depth(value: object) -> Depth:
    """Convert a configured depth to a traversal budget.

    Accepts integers ``>= -1`` (also as digit strings) and ``"all"``,
    ``"inf"`` or ``"unbounded"`` for `UNBOUNDED`.

    Raises:
        ValueError: If ``value`` is not a valid depth.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid depth: {value!r}")
    if isinstance(value, str):
        text = value.strip().lower()
        if text in UNBOUNDED_DEPTH_NAMES:
            return UNBOUNDED
        try:
            value = int(text)
        except ValueError:
            raise ValueError(f"Invalid depth: {value!r}") from None
    if not isinstance(value, int) or value < -1:
        raise ValueError(f"Invalid depth: {value!r} (expected an integer >= -1 or 'all')")
    return value


def _expect_str(value: object) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return value


def _expect_bool(value: object) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {type(value).__name__}")
    return value


# TOML key -> (Settings field, converter)
_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    Toml.KEY_DEPTH: ("depth", parse_depth),
    Toml.KEY_RENDER_DEPTH: ("render_depth", parse_depth),
    Toml.KEY_INDENT: ("indent", _expect_str),
    Toml.KEY_FORMAT: ("render_format", RenderFormat),
    Toml.KEY_TEMPLATE: ("template", TemplateStyle),
    Toml.KEY_AUDIENCE: ("audience", Audience),
    Toml.KEY_TITLE: ("title", _expect_str),
    Toml.KEY_DECODE_BASE64: ("decode_base64", _expect_bool),
    Toml.KEY_RECURSIVE_JSON: ("recursive_json", _expect_bool),
}


def read_toml(path: Path) -> TomlTable:
    """Parse the TOML file at ``path`` into a plain dict.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def extract_table(doc: TomlTable, path: Path) -> TomlTable:
    """Return the TextAlchemy table of ``doc``.

    ``pyproject.toml`` files (and any document with a ``[tool.textalchemy]``
    table) yield that table; other documents are used as a whole.
    """
    tool = doc.get(Toml.SECTION_TOOL)
    if isinstance(tool, dict) and PYPROJECT_TOOL_SECTION in tool:
        table = tool[PYPROJECT_TOOL_SECTION]
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} is not a table")
        return table
    if path.name == PYPROJECT_FILE_NAME:
        return {}
    return doc


def settings_overrides(table: TomlTable, source: Path) -> dict[str, Any]:
    """Convert a TOML table to `Settings` field overrides.

    Raises:
        ConfigError: If a recognized key holds a value of the wrong type.
    """
    overrides: dict[str, Any] = {}
    for key, raw in table.items():
        entry = _FIELDS.get(key)
        if entry is None:
            logger.warning("Ignoring unknown config key %r in %s", key, source)
            continue
        field_name, convert = entry
        try:
            overrides[field_name] = convert(raw)
        except ValueError as exc:
            raise ConfigError(f"Invalid value for '{key}' in {source}: {exc}") from exc
    return overrides


def discover_config_files(cwd: Path | None = None) -> list[Path]:
    """Return the implicit configuration files in ``cwd``, lowest precedence first."""
    base = cwd or Path.cwd()
    candidates = [base / PYPROJECT_FILE_NAME, base / CONFIG_FILE_NAME]
    return [p for p in candidates if p.is_file()]


def load_settings(
    *,
    config_file: Path | str | None = None,
    cwd: Path | None = None,
    use_discovery: bool = True,
) -> Settings:
    """Build `Settings` from defaults and TOML sources.

    Args:
        config_file (Path | str | None): Explicit file applied last.
        cwd (Path | None): Directory searched for implicit files (default: CWD).
        use_discovery (bool): Whether to read implicit files at all.

    Returns:
        Settings: The merged settings.

    Raises:
        ConfigError: If a source is unreadable, malformed or wrongly typed.
    """
    sources: list[Path] = discover_config_files(cwd) if use_discovery else []
    if config_file is not None:
        explicit = Path(config_file)
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        sources.append(explicit)

    settings = Settings()
    for path in sources:
        table = extract_table(read_toml(path), path)
        if not table:
            continue
        logger.debug("Applying config from %s: %s", path, sorted(table))
        settings = settings.merged(**settings_overrides(table, path))
    return settings
