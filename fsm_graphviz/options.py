'''
Rendering options for GraphEmitter.
'''

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

STYLES = ("styled", "compact")

# state shape used when none is given, per output style
DEFAULT_STATE_SHAPES = {"styled": "Mrecord", "compact": "ellipse"}

# camelCase keys as they appear in machine tables
OPTION_ALIASES = {
    "eventShape": "event_shape",
    "stateShape": "state_shape",
    "stateFillcolor": "state_fillcolor",
    "stateFontcolor": "state_fontcolor",
}


class ConfigError(ValueError):
    """Malformed machine table or rendering option."""


@dataclass(frozen=True)
class GraphOptions:
    name: str = ""
    fontname: str = "SF Pro Text"
    directed: bool = False
    event_shape: str = "Mrecord"
    state_shape: Optional[str] = None
    style: str = "styled"
    colorscheme: str = "spectral11"
    state_fillcolor: str = "2"
    state_fontcolor: str = "white"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "directed":
                if not isinstance(value, bool):
                    raise ConfigError(f"option 'directed' must be true or false, got {value!r}")
            elif not isinstance(value, str) and not (f.name == "state_shape" and value is None):
                raise ConfigError(f"option {f.name!r} must be a string, got {value!r}")
        # the name is also a file stem
        if "/" in self.name or "\\" in self.name or self.name in (".", ".."):
            raise ConfigError(f"graph name {self.name!r} must not be a path")
        if self.style not in STYLES:
            raise ConfigError(f"style must be one of {', '.join(STYLES)}, got {self.style!r}")

    @property
    def resolved_state_shape(self) -> str:
        return self.state_shape or DEFAULT_STATE_SHAPES[self.style]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "GraphOptions":
        """
        Build options from a plain dict, accepting the camelCase spellings
        (eventShape, stateShape, ...) next to the attribute names.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in mapping.items():
            attr = OPTION_ALIASES.get(key, key)
            if attr not in known:
                raise ConfigError(f"unknown graph option {key!r}")
            kwargs[attr] = value
        return cls(**kwargs)
