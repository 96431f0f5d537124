import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from cassino.gui import constants as C

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardDimensions:
    width: float = float(C.CARD_W)
    height: float = float(C.CARD_H)


@dataclass(frozen=True)
class TableLayout:
    loose_origin_x: float = float(C.LOOSE_ORIGIN_X)
    loose_y: float = float(C.LOOSE_Y)
    loose_spacing: float = float(C.LOOSE_SPACING)

    build_origin_x: float = float(C.BUILD_ORIGIN_X)
    build_y: float = float(C.BUILD_Y)
    build_spacing: float = float(C.BUILD_SPACING)
    build_width_factor: float = float(C.BUILD_WIDTH_FACTOR)

    temp_stack_origin_x: float = float(C.TEMP_STACK_ORIGIN_X)
    temp_stack_y: float = float(C.TEMP_STACK_Y)
    temp_stack_spacing: float = float(C.TEMP_STACK_SPACING)
    temp_stack_width_factor: float = float(C.TEMP_STACK_WIDTH_FACTOR)


@dataclass(frozen=True)
class TableConfig:
    card: CardDimensions = field(default_factory=CardDimensions)
    contact_threshold: float = C.CONTACT_THRESHOLD
    layout: TableLayout = field(default_factory=TableLayout)


DEFAULT_TABLE_CONFIG = TableConfig()


def _resolve_config_path(config_path: str | Path | None) -> Path:
    return Path(config_path) if config_path else Path.cwd() / "config.yaml"


def _load_config_data(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        logger.warning(f"Ignoring unreadable config {path}: {exc}")
        return {}
    return data if isinstance(data, dict) else {}


def _as_positive(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(default)
    return number if number > 0 else float(default)


def _as_non_negative(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(default)
    return number if number >= 0 else float(default)


def _as_threshold(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if 0 < number < 1 else default


def _load_layout(raw: Any) -> TableLayout:
    if not isinstance(raw, dict):
        return TableLayout()
    defaults = TableLayout()
    values = {}
    for f in fields(TableLayout):
        default = getattr(defaults, f.name)
        # Origins and rows may sit on the table edge; spacings and widths may not
        if f.name.endswith(("_origin_x", "_y")):
            values[f.name] = _as_non_negative(raw.get(f.name, default), default)
        else:
            values[f.name] = _as_positive(raw.get(f.name, default), default)
    return TableLayout(**values)


def load_table_config(config_path: str | Path | None = None) -> TableConfig:
    data = _load_config_data(_resolve_config_path(config_path))

    table_cfg = data.get("table", {}) if isinstance(data, dict) else {}
    if not isinstance(table_cfg, dict):
        table_cfg = {}

    card = CardDimensions(
        width=_as_positive(table_cfg.get("card_width", C.CARD_W), C.CARD_W),
        height=_as_positive(table_cfg.get("card_height", C.CARD_H), C.CARD_H),
    )
    threshold = _as_threshold(
        table_cfg.get("contact_threshold", C.CONTACT_THRESHOLD), C.CONTACT_THRESHOLD
    )

    env_threshold = os.getenv(C.CONTACT_THRESHOLD_ENV)
    if env_threshold:
        env_threshold = env_threshold.strip()
        if env_threshold:
            threshold = _as_threshold(env_threshold, threshold)

    return TableConfig(
        card=card,
        contact_threshold=threshold,
        layout=_load_layout(table_cfg.get("layout")),
    )
