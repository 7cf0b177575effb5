"""Raise schedule tables.

SDK layer - static configuration data for the projection engine.

The reference tables model the 2025 Alliance and KP wage proposals. Both
start at the October 2025 anchor and cover a four-year contract; after
2028 each gets the same projected 3% every October. A schedules.yaml file
in the config directory replaces the reference tables entirely so other
proposals can be modeled without touching the engine.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .config import SCHEDULES_FILENAME, ConfigNotFoundError, get_config_dir, get_schedules_path
from .schemas import ProjectionConfig, RaiseEvent, Schedule

logger = logging.getLogger(__name__)


START_DATE = date(2025, 10, 1)

ALLIANCE_SCHEDULE = Schedule(
    name="Alliance",
    events=[
        RaiseEvent(month=10, year=2025, rate=1.09, description="9.0% First Year"),
        RaiseEvent(month=10, year=2026, rate=1.05, description="5.0% Second Year"),
        RaiseEvent(month=4, year=2027, rate=1.03, description="3.0% Mid-Term"),
        RaiseEvent(month=10, year=2027, rate=1.04, description="4.0% Third Year"),
        RaiseEvent(month=10, year=2028, rate=1.04, description="4.0% Final Year"),
    ],
)

KP_SCHEDULE = Schedule(
    name="KP",
    events=[
        RaiseEvent(month=10, year=2025, rate=1.065, description="6.5% Initial"),
        RaiseEvent(month=10, year=2026, rate=1.065, description="6.5% Second"),
        RaiseEvent(month=8, year=2027, rate=1.03, description="3.0% Retention"),
        RaiseEvent(month=10, year=2027, rate=1.025, description="2.5% Third Year"),
        RaiseEvent(month=10, year=2028, rate=1.03, description="3.0% Final Year"),
    ],
)

# Projected 3% annually thereafter
POST_CONTRACT_RAISE = 1.03

DEFAULT_CONFIG = ProjectionConfig(
    anchor=START_DATE,
    alliance=ALLIANCE_SCHEDULE,
    kp=KP_SCHEDULE,
    fallback_rate=POST_CONTRACT_RAISE,
)


class ScheduleConfigError(Exception):
    """Raised when a schedules file is missing or malformed."""
    pass


def parse_projection_config(data: Dict[str, Any]) -> ProjectionConfig:
    """Validate a schedules mapping (as loaded from YAML).

    Expected shape:
        anchor: 2025-10-01
        fallback_rate: 1.03
        alliance: {name: Alliance, events: [{month, year, rate, description}, ...]}
        kp: {name: KP, events: [...]}

    Raises:
        ScheduleConfigError: If validation fails
    """
    if not isinstance(data, dict):
        raise ScheduleConfigError("Schedules file must contain a mapping at the top level")

    try:
        return ProjectionConfig.model_validate(data)
    except ValidationError as e:
        raise ScheduleConfigError(f"Invalid schedules configuration:\n{e}") from e


def load_schedules_file(path: Path) -> ProjectionConfig:
    """Load and validate a schedules YAML file.

    Raises:
        ScheduleConfigError: If the file is missing, unparseable, or invalid
    """
    if not path.exists():
        raise ScheduleConfigError(f"Schedules file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ScheduleConfigError(f"Failed to parse {path}: {e}") from e

    config = parse_projection_config(data)
    logger.debug(
        f"Loaded schedules from {path}: "
        f"{len(config.alliance.events)} {config.alliance.name} / "
        f"{len(config.kp.events)} {config.kp.name} events"
    )
    return config


def load_projection_config(path: Optional[Path] = None) -> ProjectionConfig:
    """Resolve the projection configuration.

    Resolution order:
    1. Explicit path (if provided)
    2. schedules.yaml from the config directory (see config.get_schedules_path)
    3. Built-in reference tables

    Raises:
        ScheduleConfigError: If a resolved file is missing or invalid
    """
    if path is not None:
        return load_schedules_file(Path(path))

    try:
        schedules_path = get_schedules_path()
    except ConfigNotFoundError as e:
        raise ScheduleConfigError(str(e)) from e

    if schedules_path.exists():
        return load_schedules_file(schedules_path)

    return DEFAULT_CONFIG


def schedules_to_dict(config: ProjectionConfig) -> Dict[str, Any]:
    """Serialize a configuration into the schedules.yaml shape."""
    return config.model_dump(mode="json")


def write_default_schedules(path: Optional[Path] = None, overwrite: bool = False) -> Path:
    """Write the reference tables to a schedules.yaml for editing.

    Args:
        path: Destination (default: schedules.yaml in the config directory)
        overwrite: Replace an existing file

    Returns:
        Path to the written file

    Raises:
        FileExistsError: If the file exists and overwrite is False
    """
    target = Path(path) if path else get_config_dir() / SCHEDULES_FILENAME
    if target.exists() and not overwrite:
        raise FileExistsError(f"Schedules file already exists: {target}")

    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w") as f:
        yaml.safe_dump(schedules_to_dict(DEFAULT_CONFIG), f, sort_keys=False)

    logger.info(f"Wrote reference schedules to {target}")
    return target
