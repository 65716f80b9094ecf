# topmark:header:start
#
#   project      : TomLayer
#   file         : loader.py
#   file_relpath : src/tomlayer/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layered configuration loading.

`load_config` composes the building blocks of this package into one pipeline.
Layers are merged with `tomlayer.tree.merge.deep_merge`, lowest precedence first:

    1. runtime defaults (`tomlayer.io.loaders.load_defaults_dict`)
    2. configuration files, in the order given
    3. explicit overrides: a tree, then ``dotted.path=value`` assignments
       (`apply_assignments`, e.g. ``--set server.port=9000`` on the CLI)
    4. environment variables (`tomlayer.tree.env.apply_env_overrides`)

The final tree is validated (`tomlayer.schema.validation.validate_tree`) and,
when valid, mapped onto an `AppConfig`. Diagnostics from every stage end up in a
single log carried by the returned `LoadedConfig`.

Example:
    ```python
    from tomlayer.loader import load_config

    loaded = load_config(["config.toml"], environ={"DATABASE_URL": "sqlite://"})
    if loaded.ok:
        print(loaded.config.server.address)
    ```
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tomlayer.constants import DEFAULT_ENV_BINDINGS, ENV_PREFIX
from tomlayer.core.diagnostics import DiagnosticLog, FrozenDiagnosticLog
from tomlayer.core.errors import ConfigTypeError, ConfigValidationError
from tomlayer.core.logging import get_logger
from tomlayer.io.loaders import load_defaults_dict, load_toml_file, load_toml_section
from tomlayer.schema.model import AppConfig
from tomlayer.schema.validation import validate_tree
from tomlayer.tree.env import apply_env_overrides, coerce_env_value
from tomlayer.tree.merge import deep_merge
from tomlayer.tree.paths import get_path, set_path, split_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from tomlayer.core.logging import TomlayerLogger
    from tomlayer.io.types import TomlTable
    from tomlayer.schema.validation import ValidationReport

logger: TomlayerLogger = get_logger(__name__)

DEFAULTS_SOURCE: str = "<defaults>"
OVERRIDES_SOURCE: str = "<overrides>"
ENVIRONMENT_SOURCE: str = "<environment>"


@dataclass(frozen=True, slots=True)
class LoadedConfig:
    """Result of `load_config`.

    Attributes:
        tree (TomlTable): The final merged tree (after environment overrides).
        config (AppConfig | None): The typed configuration; None when the tree is invalid.
        diagnostics (FrozenDiagnosticLog): Diagnostics from merging, environment
            overrides and validation.
        sources (tuple[str, ...]): The layers that were merged, lowest precedence first.
    """

    tree: TomlTable
    config: AppConfig | None
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)
    sources: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True when the tree is valid and a typed config was built."""
        return self.config is not None and not self.diagnostics.has_error()


def parse_assignment(text: str) -> tuple[str, str]:
    """Split a ``dotted.path=value`` assignment into its path and raw value text.

    The value is coerced later, against the merged tree, by `apply_assignments`.

    Raises:
        ValueError: If ``text`` has no ``=`` or the path is not a valid dotted path.
    """
    path, sep, raw = text.partition("=")
    if not sep:
        raise ValueError(f"Expected KEY=VALUE, got {text!r}")
    path = path.strip()
    split_path(path)
    return path, raw.strip()


def apply_assignments(
    tree: Mapping[str, Any],
    assignments: Iterable[str],
    *,
    diagnostics: DiagnosticLog | None = None,
) -> TomlTable:
    """Return a copy of ``tree`` with ``dotted.path=value`` assignments applied.

    Later assignments win. Values are coerced like environment values: the text
    is kept when the current value is a string, and read as a TOML literal
    otherwise (``server.port=9000`` -> int, ``server.host=8080`` -> str).

    Raises:
        ValueError: If an assignment is malformed or its path crosses a non-table value.
    """
    result: TomlTable = copy.deepcopy(dict(tree))
    for text in assignments:
        path, raw = parse_assignment(text)
        try:
            set_path(result, path, coerce_env_value(raw, get_path(result, path)))
        except ConfigTypeError as exc:
            raise ValueError(f"Cannot apply {text!r}: {exc}") from exc
        logger.debug("Applied assignment to %s", path)
        if diagnostics is not None:
            diagnostics.add_info(f"{path} overridden by assignment")
    return result


def _load_file_layer(
    path: Path,
    section: str | None,
    diagnostics: DiagnosticLog,
) -> TomlTable | None:
    if section is None:
        return load_toml_file(path)
    table: TomlTable | None = load_toml_section(path, section)
    if table is None:
        diagnostics.add_warning(f"Section [{section}] not found in {path}; file ignored")
    return table


def load_config(
    paths: Iterable[Path | str] = (),
    *,
    overrides: Mapping[str, Any] | None = None,
    assignments: Iterable[str] = (),
    environ: Mapping[str, str] | None = None,
    use_env: bool = True,
    bindings: Mapping[str, str] = DEFAULT_ENV_BINDINGS,
    env_prefix: str = ENV_PREFIX,
    section: str | None = None,
    strict: bool = False,
) -> LoadedConfig:
    """Load, merge, override and validate configuration.

    Args:
        paths (Iterable[Path | str]): TOML files, lowest precedence first.
        overrides (Mapping[str, Any] | None): A tree merged over the files.
        assignments (Iterable[str]): ``dotted.path=value`` texts applied after
            ``overrides`` (e.g. from ``--set``), coerced against the merged tree.
        environ (Mapping[str, str] | None): Environment to read; defaults to ``os.environ``.
        use_env (bool): Apply environment overrides.
        bindings (Mapping[str, str]): Environment variable name to dotted path bindings.
        env_prefix (str): Prefix of generic override variables.
        section (str | None): Dotted table to read from each file instead of its
            root (e.g. ``"tool.tomlayer"`` for ``pyproject.toml``).
        strict (bool): Raise instead of returning an invalid result.

    Returns:
        LoadedConfig: The merged tree, the typed config (when valid) and all diagnostics.

    Raises:
        ConfigFileError: If a file cannot be read.
        ConfigParseError: If a file is not valid TOML.
        ValueError: If an assignment is malformed or conflicts with the tree.
        ConfigValidationError: If ``strict`` is set and the final tree is invalid.
    """
    log = DiagnosticLog()
    sources: list[str] = [DEFAULTS_SOURCE]
    tree: TomlTable = load_defaults_dict()

    for p in paths:
        path = Path(p)
        layer: TomlTable | None = _load_file_layer(path, section, log)
        if layer is None:
            continue
        tree = deep_merge(tree, layer, diagnostics=log)
        sources.append(str(path))

    assignment_list: list[str] = list(assignments)
    if overrides:
        tree = deep_merge(tree, overrides, diagnostics=log)
    if assignment_list:
        tree = apply_assignments(tree, assignment_list, diagnostics=log)
    if overrides or assignment_list:
        sources.append(OVERRIDES_SOURCE)

    if use_env:
        tree = apply_env_overrides(
            tree,
            environ,
            bindings=bindings,
            prefix=env_prefix,
            diagnostics=log,
        )
        sources.append(ENVIRONMENT_SOURCE)

    logger.debug("Merged configuration from %s", ", ".join(sources))

    report: ValidationReport = validate_tree(tree, diagnostics=log)
    if not report.ok:
        if strict:
            errors: list[str] = report.errors()
            raise ConfigValidationError(
                f"Invalid configuration ({len(errors)} error(s)): " + "; ".join(errors),
                report=report,
            )
        logger.info("Configuration is invalid: %s", report.stats())
        return LoadedConfig(
            tree=tree,
            config=None,
            diagnostics=report.diagnostics,
            sources=tuple(sources),
        )

    return LoadedConfig(
        tree=tree,
        config=AppConfig.from_toml_table(tree),
        diagnostics=report.diagnostics,
        sources=tuple(sources),
    )
