# topmark:header:start
#
#   project      : LineMark
#   file         : model.py
#   file_relpath : src/linemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the conversion pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

TOML layout:

    ```toml
    root = false             # stop upward discovery at this directory

    [input]
    encoding = "utf-8"       # encoding of source documents and templates

    [output]
    encoding = "utf-8"       # encoding of written HTML files
    line_separator = "\\n"    # joins converted lines into the content body
    suffix = ".html"         # default output suffix (replaces the source suffix)
    ```

In ``pyproject.toml`` the same keys live under ``[tool.linemark]``.

Merge order (lowest → highest precedence): built-in defaults, project files
discovered upward from the source directory (root-most first), explicit
``--config`` files, CLI overrides.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from linemark.config.io import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from linemark.config.logging import get_logger
from linemark.constants import LINEMARK_TOML_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from linemark.config.io import TomlTable
    from linemark.config.logging import LinemarkLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: LinemarkLogger = get_logger(__name__)

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_LINE_SEPARATOR: str = "\n"
DEFAULT_OUTPUT_SUFFIX: str = ".html"

_KNOWN_TOP_LEVEL_KEYS: frozenset[str] = frozenset({"root", "input", "output"})


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for LineMark.

    Attributes:
        input_encoding (str): Encoding used to read source documents and templates.
        output_encoding (str): Encoding used to write HTML output files.
        line_separator (str): Separator used to join converted lines into content.
        output_suffix (str): Suffix of the default output path derived from the source.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
    """

    input_encoding: str
    output_encoding: str
    line_separator: str
    output_suffix: str
    config_files: tuple[Path | str, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict."""
        return {
            "input": {"encoding": self.input_encoding},
            "output": {
                "encoding": self.output_encoding,
                "line_separator": self.line_separator,
                "suffix": self.output_suffix,
            },
        }

    def to_toml(self) -> str:
        """Render this Config as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            input_encoding=self.input_encoding,
            output_encoding=self.output_encoding,
            line_separator=self.line_separator,
            output_suffix=self.output_suffix,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every value is tri-state (``None`` = inherit) so that merging a partial
    config file never clobbers an earlier layer with defaults.
    """

    input_encoding: str | None = None
    output_encoding: str | None = None
    line_separator: str | None = None
    output_suffix: str | None = None
    root: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Values still unset fall back to the built-in defaults.
        """
        return Config(
            input_encoding=self.input_encoding or DEFAULT_ENCODING,
            output_encoding=self.output_encoding or DEFAULT_ENCODING,
            line_separator=(
                DEFAULT_LINE_SEPARATOR if self.line_separator is None else self.line_separator
            ),
            output_suffix=self.output_suffix or DEFAULT_OUTPUT_SUFFIX,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls(
            input_encoding=DEFAULT_ENCODING,
            output_encoding=DEFAULT_ENCODING,
            line_separator=DEFAULT_LINE_SEPARATOR,
            output_suffix=DEFAULT_OUTPUT_SUFFIX,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Unknown keys and mistyped values are logged and ignored.

        Args:
            data (TomlTable): The parsed TOML data (the ``[tool.linemark]`` table
                when read from ``pyproject.toml``).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting draft.
        """
        for key in data:
            if key not in _KNOWN_TOP_LEVEL_KEYS:
                logger.warning("Unknown config key %r in %s; ignoring", key, config_file)

        input_tbl: TomlTable = get_table_value(data, "input")
        logger.trace("TOML [input]: %s", input_tbl)
        output_tbl: TomlTable = get_table_value(data, "output")
        logger.trace("TOML [output]: %s", output_tbl)

        return cls(
            input_encoding=get_string_value_or_none(input_tbl, "encoding"),
            output_encoding=get_string_value_or_none(output_tbl, "encoding"),
            line_separator=get_string_value_or_none(output_tbl, "line_separator"),
            output_suffix=get_string_value_or_none(output_tbl, "suffix"),
            root=get_bool_value_or_none(data, "root"),
            config_files=[config_file] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``linemark.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.linemark]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft if successful; ``None`` when a
                ``pyproject.toml`` has no ``[tool.linemark]`` section.

        Raises:
            ConfigError: If the file is unreadable or not valid TOML.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_table: TomlTable = get_table_value(toml_data, "tool")
            tool_section: TomlTable = get_table_value(tool_table, "linemark")
            if not tool_section:
                logger.debug("[tool.linemark] section missing in %s", path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned root-most first, nearest last. Within one directory
        ``pyproject.toml`` comes before ``linemark.toml`` so that the tool file
        wins a nearest-last merge. A file declaring ``root = true`` stops the
        walk after its directory.

        Args:
            start (Path): The directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered config file paths ordered for merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []

            for name in (PYPROJECT_TOML_NAME, LINEMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                draft: MutableConfig | None = cls.from_toml_file(p)
                if draft is None:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if draft.root:
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Discovery start (a source file or directory);
                defaults to the current working directory.
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                **after** discovery, in the given order.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            start: Path = anchor if anchor is not None else Path.cwd()
            for cfg_path in cls.discover_local_config_files(start):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose set values take precedence.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            input_encoding=_pick(other.input_encoding, self.input_encoding),
            output_encoding=_pick(other.output_encoding, self.output_encoding),
            line_separator=_pick(other.line_separator, self.line_separator),
            output_suffix=_pick(other.output_suffix, self.output_suffix),
            root=_pick(other.root, self.root),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place and return ``self``.

        Recognized keys: ``encoding`` (input and output), ``input_encoding``,
        ``output_encoding``, ``output_suffix``. ``None`` values are ignored.
        """
        encoding: str | None = args.get("encoding")
        if encoding:
            self.input_encoding = encoding
            self.output_encoding = encoding
        if args.get("input_encoding"):
            self.input_encoding = args["input_encoding"]
        if args.get("output_encoding"):
            self.output_encoding = args["output_encoding"]
        if args.get("output_suffix"):
            self.output_suffix = args["output_suffix"]
        return self


def _pick(preferred: Any, fallback: Any) -> Any:
    return fallback if preferred is None else preferred
