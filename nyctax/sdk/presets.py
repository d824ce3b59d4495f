"""Example household profiles.

Loaded from nyctax/presets.yaml at import and validated against the Preset
schema. PRESETS is read-only; get_preset() hands out copies.
"""

import copy
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Union

import yaml

from .schemas import Preset
from .taxes import DEDUCTION_KEYS, INCOME_KEYS

logger = logging.getLogger(__name__)


class PresetNotFoundError(KeyError):
    """Raised when a preset name is not in the catalog."""
    pass


def _get_presets_path() -> Path:
    return Path(__file__).parent.parent / "presets.yaml"


def load_presets(path: Path = None) -> Dict[str, Dict[str, Any]]:
    """Load and validate a presets file.

    Returns:
        Dict of preset name -> preset dict, in file order
    """
    path = path or _get_presets_path()
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}

    presets = {
        name: Preset.model_validate(data).model_dump(exclude_none=True)
        for name, data in raw.items()
    }
    logger.debug(f"Loaded {len(presets)} presets from {path}")
    return presets


PRESETS = MappingProxyType(load_presets())


def list_presets() -> list[str]:
    """Preset names in catalog order (increasing total compensation)."""
    return list(PRESETS)


def get_preset(name: str) -> Dict[str, Any]:
    """Get a copy of a preset by name.

    Raises:
        PresetNotFoundError: If the name is not in the catalog
    """
    if name not in PRESETS:
        raise PresetNotFoundError(
            f"Unknown preset: {name}. Available: {', '.join(PRESETS)}"
        )
    return copy.deepcopy(PRESETS[name])


def preset_inputs(preset: Union[str, Dict[str, Any]], filing: str = None) -> Dict[str, Any]:
    """Build compute_taxes() inputs from a preset name or preset dict.

    Args:
        preset: Preset name or a dict shaped like a preset
        filing: Filing status override; falls back to the preset's own
                'filing', then 'single'
    """
    if isinstance(preset, str):
        preset = get_preset(preset)

    inputs = {key: preset.get(key, 0) for key in INCOME_KEYS + DEDUCTION_KEYS}
    inputs["filing"] = filing or preset.get("filing") or "single"
    return inputs
