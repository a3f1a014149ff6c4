"""YAML-backed configuration for pager rendering and web defaults.

Render option profiles live in ``pagelist/configs/``. ``base.yaml`` holds the
defaults; every other file is a preset that starts from ``base`` and changes a
few keys (``classic``, ``minimal``, ``page_numbers_only``, ...). Profiles are
composed with the Hydra Compose API, so ``key=value`` overrides work the same
way they do on a Hydra command line.

The web settings profile is selected by ``PAGELIST_CONFIG_NAME`` (default:
``"base"``).

Usage::

    from pagelist.config import get_settings, load_render_options

    options = load_render_options("minimal", overrides=["link_to_next_page_format=Next"])
    settings = get_settings()
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from hydra import compose, initialize_config_dir
from omegaconf import OmegaConf

from .metadata import DEFAULT_PAGE_SIZE
from .options import DisplayMode, RenderOptions, SummaryPosition

logger = logging.getLogger(__name__)

_CONFIG_DIR = str(Path(__file__).parent / "configs")

DEFAULT_MAX_PAGE_SIZE = 200

# ---------------------------------------------------------------------------
# YAML loading via Hydra Compose API
# ---------------------------------------------------------------------------

def _compose(config_name: str, overrides: list[str] | None = None) -> dict[str, object]:
    abs_dir = os.path.abspath(_CONFIG_DIR)
    with initialize_config_dir(version_base=None, config_dir=abs_dir):
        cfg = compose(config_name=config_name, overrides=overrides or [])
    container = OmegaConf.to_container(cfg, resolve=True)
    if isinstance(container, dict):
        return {str(key): value for key, value in container.items()}
    return {}


def _load_yaml_config(config_name: str) -> dict[str, object]:
    """Load a YAML profile, returning an empty dict if it cannot be composed."""
    try:
        return _compose(config_name)
    except Exception:
        logger.debug("Failed to load YAML config %r, falling back to defaults", config_name)
        return {}


def available_presets() -> list[str]:
    """Names of the shipped render option profiles."""
    return sorted(path.stem for path in Path(_CONFIG_DIR).glob("*.yaml"))


# ---------------------------------------------------------------------------
# YAML value helpers
# ---------------------------------------------------------------------------

def _yaml_int(yaml: dict[str, object], key: str, default: int) -> int:
    val = yaml.get(key)
    return int(str(val)) if val is not None else default


def _yaml_optional_int(yaml: dict[str, object], key: str) -> int | None:
    val = yaml.get(key)
    return int(str(val)) if val is not None else None


def _yaml_bool(yaml: dict[str, object], key: str, default: bool = False) -> bool:
    val = yaml.get(key)
    if val is None:
        return default
    if isinstance(val, bool):
        return val
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _yaml_list(yaml: dict[str, object], key: str) -> list[str]:
    val = yaml.get(key)
    if val is None:
        return []
    if isinstance(val, (list, tuple)):
        return [str(item).strip() for item in val if str(item).strip()]
    return [item.strip() for item in str(val).split(",") if item.strip()]


def _yaml_mapping(yaml: dict[str, object], key: str) -> dict[str, str]:
    val = yaml.get(key)
    if not isinstance(val, dict):
        return {}
    return {str(k): str(v) for k, v in val.items()}


# ---------------------------------------------------------------------------
# Render options
# ---------------------------------------------------------------------------

_DISPLAY_MODE_KEYS = (
    "display",
    "display_link_to_first_page",
    "display_link_to_previous_page",
    "display_link_to_next_page",
    "display_link_to_last_page",
)
_POSITION_KEYS = (
    "page_count_and_current_location_position",
    "item_slice_and_total_position",
)
_BOOL_KEYS = (
    "display_link_to_individual_pages",
    "display_page_count_and_current_location",
    "display_item_slice_and_total",
    "display_ellipses_when_not_showing_all_page_numbers",
    "link_ellipses_to_skipped_pages",
)
_LIST_KEYS = (
    "container_div_classes",
    "ul_element_classes",
    "li_element_classes",
    "page_classes",
)
_OPTIONAL_STR_KEYS = (
    "class_to_apply_to_first_list_item_in_pager",
    "class_to_apply_to_last_list_item_in_pager",
    "delimiter_between_page_numbers",
)
_STR_KEYS = (
    "ellipses_format",
    "link_to_first_page_format",
    "link_to_previous_page_format",
    "link_to_individual_page_format",
    "link_to_next_page_format",
    "link_to_last_page_format",
    "page_count_and_current_location_format",
    "item_slice_and_total_format",
    "active_li_element_class",
    "ellipses_element_class",
    "previous_element_class",
    "next_element_class",
)


def _build_render_options(yaml: dict[str, object]) -> RenderOptions:
    fields: dict[str, object] = {}
    for key in _DISPLAY_MODE_KEYS:
        if key in yaml:
            fields[key] = DisplayMode(str(yaml[key]).strip().lower())
    for key in _POSITION_KEYS:
        if key in yaml:
            fields[key] = SummaryPosition(str(yaml[key]).strip().lower())
    for key in _BOOL_KEYS:
        if key in yaml:
            fields[key] = _yaml_bool(yaml, key)
    for key in _LIST_KEYS:
        if key in yaml:
            fields[key] = _yaml_list(yaml, key)
    for key in _OPTIONAL_STR_KEYS:
        if key in yaml:
            val = yaml[key]
            fields[key] = str(val) if val is not None else None
    for key in _STR_KEYS:
        if yaml.get(key) is not None:
            fields[key] = str(yaml[key])
    if "maximum_page_numbers_to_display" in yaml:
        fields["maximum_page_numbers_to_display"] = _yaml_optional_int(
            yaml, "maximum_page_numbers_to_display"
        )
    if "ul_element_attributes" in yaml:
        fields["ul_element_attributes"] = _yaml_mapping(yaml, "ul_element_attributes")
    return RenderOptions(**fields)  # type: ignore[arg-type]


def load_render_options(
    name: str = "base",
    overrides: list[str] | None = None,
) -> RenderOptions:
    """Compose a render option profile and return it as ``RenderOptions``.

    Args:
        name: Profile name, one of :func:`available_presets`.
        overrides: Hydra-style ``key=value`` overrides applied on top.

    Raises:
        ValueError: *name* is not a shipped profile.
    """
    if name not in available_presets():
        raise ValueError(f"Unknown render options preset: {name!r}")
    return _build_render_options(_compose(name, overrides))


# ---------------------------------------------------------------------------
# Web settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PagerSettings:
    """Defaults used when a request does not specify its page size."""

    config_name: str = "base"
    default_page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE


@lru_cache(maxsize=1)
def get_settings() -> PagerSettings:
    """Return the web settings for the profile named by ``PAGELIST_CONFIG_NAME``.

    The result is cached; call ``get_settings.cache_clear()`` to re-read
    (useful in tests).
    """
    config_name = os.environ.get("PAGELIST_CONFIG_NAME", "base").strip().lower()
    yaml = _load_yaml_config(config_name)
    settings = PagerSettings(
        config_name=config_name,
        default_page_size=_yaml_int(yaml, "default_page_size", DEFAULT_PAGE_SIZE),
        max_page_size=_yaml_int(yaml, "max_page_size", DEFAULT_MAX_PAGE_SIZE),
    )
    if settings.default_page_size < 1 or settings.max_page_size < settings.default_page_size:
        raise ValueError(
            f"Invalid page size settings in {config_name!r}: "
            f"default_page_size={settings.default_page_size}, "
            f"max_page_size={settings.max_page_size}"
        )
    return settings
