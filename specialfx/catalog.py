"""Named effect catalog.

The :class:`EffectCatalog` maps logical, host-defined effect names (for
example ``"game-start"`` or ``"explosion-trap"``) to effect specifications
and plays them on request::

    catalog = EffectCatalog.from_yaml(Path("config/effects.yaml"), renderer=renderer)
    catalog.play_effect(location, "game-start")

Descriptors are parsed the first time a name is used and cached for the
lifetime of the catalog.  A name whose spec fails to parse is not cached, so
every later lookup parses (and fails) again.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

import structlog
import yaml

from .errors import InvalidSpec, UnknownOrInvalidEffect
from .models import EffectDescriptor
from .parser import parse
from .renderer import EffectRenderer, Location

log = structlog.get_logger(__name__)

VOLUME_KEY = "volume"


def load_effects_config(config_path: Path, section: Optional[str] = None) -> Dict[str, Any]:
    """Load an effects mapping from a YAML file.

    ``section`` selects a nested mapping, e.g. ``"effects"`` when the file
    also carries unrelated settings.
    """
    if not config_path.is_file():
        log.error("Effects config file not found", path=str(config_path))
        raise FileNotFoundError(f"Effects configuration file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error("Error parsing YAML for effects", path=str(config_path), error=str(e))
        raise
    if config_data is None:
        log.warning("Effects config file is empty.", path=str(config_path))
        return {}
    if section is not None:
        config_data = config_data.get(section) or {}
    if not isinstance(config_data, dict):
        raise ValueError(f"Effects configuration in {config_path} is not a mapping")
    log.info("Effects config loaded", path=str(config_path), entries=len(config_data))
    return config_data


def _read_volume(config: Mapping[str, Any]) -> float:
    raw = config.get(VOLUME_KEY, 1.0)
    try:
        return float(raw)
    except (TypeError, ValueError):
        log.warning("Invalid master volume - using 1.0", value=raw)
        return 1.0


class EffectCatalog:
    """Resolves logical effect names to cached :class:`EffectDescriptor` objects.

    Parameters
    ----------
    config:
        Mapping of effect name to spec string.  An optional ``volume`` entry
        sets the master volume (default ``1.0``) applied to every sound.
    renderer:
        Renderer used by :meth:`play_effect`.  Defaults to a renderer with no
        sink, which validates effects without playing them.
    """

    def __init__(
        self,
        config: Mapping[str, Any],
        renderer: Optional[EffectRenderer] = None,
    ) -> None:
        self._config = config
        self._master_volume = _read_volume(config)
        self._effects: Dict[str, EffectDescriptor] = {}
        self.renderer = renderer if renderer is not None else EffectRenderer()

    @classmethod
    def from_yaml(
        cls,
        config_path: Path,
        section: Optional[str] = None,
        renderer: Optional[EffectRenderer] = None,
    ) -> "EffectCatalog":
        return cls(load_effects_config(Path(config_path), section), renderer=renderer)

    @property
    def master_volume(self) -> float:
        return self._master_volume

    def names(self) -> List[str]:
        """Configured effect names, excluding the ``volume`` setting."""
        return [name for name in self._config if name != VOLUME_KEY]

    def __contains__(self, name: object) -> bool:
        return name != VOLUME_KEY and name in self._config

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def _raw_spec(self, name: str) -> Optional[str]:
        raw = self._config.get(name)
        if raw is None:
            return None
        return raw if isinstance(raw, str) else str(raw)

    def get_descriptor(self, name: str) -> EffectDescriptor:
        """Return the descriptor for ``name``, parsing it on first use.

        Raises
        ------
        UnknownOrInvalidEffect
            The name is not configured or its spec is invalid.
        """
        descriptor = self._effects.get(name)
        if descriptor is not None:
            return descriptor
        try:
            descriptor = parse(self._raw_spec(name), self._master_volume)
        except InvalidSpec as err:
            raise UnknownOrInvalidEffect(name, err) from err
        # Concurrent first lookups of one name all return the first insert.
        return self._effects.setdefault(name, descriptor)

    def play_effect(self, location: Optional[Location], name: str) -> None:
        """Play the named effect at ``location``.

        A ``None`` location plays nothing but still validates the effect.
        """
        descriptor = self.get_descriptor(name)
        try:
            self.renderer.render(descriptor, location)
        except InvalidSpec as err:
            raise UnknownOrInvalidEffect(name, err) from err

    def validate(self) -> Dict[str, UnknownOrInvalidEffect]:
        """Validate every configured effect without playing anything.

        Returns the failures keyed by effect name; an empty dict means the
        configuration is valid.
        """
        failures: Dict[str, UnknownOrInvalidEffect] = {}
        for name in self.names():
            try:
                self.play_effect(None, name)
            except UnknownOrInvalidEffect as err:
                log.warning("Invalid effect definition", effect=name, error=str(err.cause))
                failures[name] = err
        return failures
