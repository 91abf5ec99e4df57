from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import yaml

from .indicators.rma import DEFAULT_PERIOD, RelativeMovingAverage

logger = logging.getLogger(__name__)


@dataclass
class SmootherConfig:
    """Parameters for a :class:`RelativeMovingAverage`."""

    period: int = DEFAULT_PERIOD


def find_config_file(cwd: Path | None = None) -> str | None:
    """Return path to ``smoothline.yml``/``smoothline.yaml`` in ``cwd`` if present."""

    base = Path.cwd() if cwd is None else cwd
    for name in ("smoothline.yml", "smoothline.yaml"):
        candidate = base / name
        if candidate.is_file():
            return str(candidate)
    return None


def load_config(path: str) -> SmootherConfig:
    """Parse YAML/JSON and populate :class:`SmootherConfig`."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                logger.error("Failed to parse configuration file %s: %s", path, exc)
                raise ValueError(f"Failed to parse configuration file {path}") from exc
    except (FileNotFoundError, OSError) as exc:
        logger.error("Unable to open configuration file %s: %s", path, exc)
        raise

    if not isinstance(data, dict):
        raise TypeError("smoothline config must be a mapping")

    smoother_data = data.get("smoother", {})
    if not isinstance(smoother_data, dict):
        raise TypeError("smoother section must be a mapping")

    return SmootherConfig(**smoother_data)


def build_smoother(config: SmootherConfig | None = None) -> RelativeMovingAverage:
    """Construct the smoother described by ``config``.

    An invalid period propagates :class:`~smoothline.exceptions.InvalidParameterError`
    so the configuration is rejected rather than corrected.
    """

    if config is None:
        return RelativeMovingAverage.default()
    return RelativeMovingAverage(config.period)
