"""Configuration loader for blockformat.

Configuration is resolved in priority order: **project > user > defaults**.

1. **Project-level** — ``.blockformat.yml`` in (or above) the start directory.
2. **User-level** — ``~/.blockformat/config.yml``.
3. **Built-in defaults** — ``default_hash_alg: sha2-256``, ``cid_version: 1``.

Both files share the same format::

    format:
      default_hash_alg: sha2-256
      cid_version: 1
    codecs:
      my-codec: 0x300001

Project-level values override user-level values.  Arguments passed to
``convert`` override both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from blockformat.codecs.registry import register_codec

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".blockformat.yml"
USER_CONFIG_DIR = Path.home() / ".blockformat"
USER_CONFIG_PATH = USER_CONFIG_DIR / "config.yml"

DEFAULT_HASH_ALG = "sha2-256"
DEFAULT_CID_VERSION = 1


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class FormatConfig:
    """Defaults applied to every converted format."""

    default_hash_alg: str = DEFAULT_HASH_ALG
    cid_version: int = DEFAULT_CID_VERSION


@dataclass
class BlockFormatConfig:
    """Top-level configuration container."""

    format: FormatConfig = field(default_factory=FormatConfig)
    codecs: dict[str, int] = field(default_factory=dict)

    # Where the effective config was loaded from (None = defaults only).
    project_config_path: str | None = None
    user_config_path: str | None = None


# ---------------------------------------------------------------------------
# Public loaders
# ---------------------------------------------------------------------------


def load_config(
    start_dir: str | None = None,
    config_path: str | Path | None = None,
) -> BlockFormatConfig:
    """Load merged configuration (project > user > defaults).

    Parameters
    ----------
    start_dir:
        Directory to search for ``.blockformat.yml``.  When *None*, only
        the user-level file (and defaults) are considered.
    config_path:
        Explicit config file path.  When given, *only* this file is
        loaded (no project/user search).
    """
    if config_path is not None:
        raw = _load_yaml(Path(config_path).expanduser())
        cfg = _raw_to_config(raw)
        cfg.project_config_path = str(config_path) if raw else None
        return cfg

    user_raw = _load_yaml(USER_CONFIG_PATH)
    user_source = str(USER_CONFIG_PATH) if user_raw else None

    project_raw: dict | None = None
    project_source: str | None = None
    if start_dir is not None:
        project_path = _find_project_config(start_dir)
        if project_path is not None:
            project_raw = _load_yaml(project_path)
            project_source = str(project_path) if project_raw else None

    cfg = _raw_to_config(_merge_raw(project_raw, user_raw))
    cfg.project_config_path = project_source
    cfg.user_config_path = user_source
    logger.debug("loaded config project=%s user=%s", project_source, user_source)
    return cfg


def apply_config(cfg: BlockFormatConfig) -> None:
    """Register the extra codec names declared in *cfg*."""
    for name, code in cfg.codecs.items():
        register_codec(name, code)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _find_project_config(start_dir: str) -> Path | None:
    """Search for ``.blockformat.yml`` in *start_dir* and ancestors."""
    p = Path(start_dir)
    candidates = [p / CONFIG_FILENAME]
    for parent in p.parents:
        candidates.append(parent / CONFIG_FILENAME)
        if (parent / ".git").exists():
            break
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def _load_yaml(path: Path) -> dict | None:
    """Load a YAML file, returning *None* on missing/invalid files."""
    path = path.expanduser()
    if not path.is_file():
        return None
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return None
    return raw if isinstance(raw, dict) else None


def _merge_raw(project: dict | None, user: dict | None) -> dict:
    """Merge project and user raw dicts section by section (project wins)."""
    base: dict = {}
    for source in (user, project):
        if not source:
            continue
        for key in ("format", "codecs"):
            section = source.get(key)
            if isinstance(section, dict):
                base.setdefault(key, {})
                base[key].update(section)
    return base


def _raw_to_config(raw: dict | None) -> BlockFormatConfig:
    """Convert a raw YAML dict to a ``BlockFormatConfig``."""
    if not raw:
        return BlockFormatConfig()

    format_raw = raw.get("format", {})
    if not isinstance(format_raw, dict):
        format_raw = {}

    format_cfg = FormatConfig(
        default_hash_alg=str(format_raw.get("default_hash_alg", DEFAULT_HASH_ALG)),
        cid_version=_as_int(format_raw.get("cid_version", DEFAULT_CID_VERSION), DEFAULT_CID_VERSION),
    )

    return BlockFormatConfig(format=format_cfg, codecs=_as_codes(raw.get("codecs", {})))


def _as_codes(val: object) -> dict[str, int]:
    """Coerce a ``name: code`` mapping; codes may be ints or ``0x`` strings."""
    if not isinstance(val, dict):
        return {}
    out: dict[str, int] = {}
    for name, code in val.items():
        parsed = _as_int(code, None)
        if parsed is None:
            continue
        out[str(name)] = parsed
    return out


def _as_int(val: object, default: int | None) -> int | None:
    """Coerce an int or a ``0x``/decimal string; warn and use *default* otherwise."""
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    try:
        return int(str(val), 0)
    except ValueError:
        logger.warning("ignoring non-integer config value %r", val)
        return default
