"""
Unravel Config - Runtime Configuration

Property-based configuration for traversal behavior. Allows fine-grained
control over slicing and value conversion without changing function
signatures.

Configuration is read once, when a traversal function is called, and
captured by the sequence it returns. Changing configuration afterwards (or
leaving a ``config.local(...)`` block) never affects a sequence that already
exists.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

logger = logging.getLogger("unravel.config")


# =============================================================================
# Configuration Sections
# =============================================================================

@dataclass(frozen=True)
class SliceConfig:
    """Configuration for slice resolution."""
    zero_take_is_default: bool = True   # take=0 means "full extent"; False makes it an error


@dataclass(frozen=True)
class CellConfig:
    """Configuration for values read from the matrix."""
    python_scalars: bool = False        # convert numpy scalars with .item()


_SECTIONS = ("slice", "cell")


# =============================================================================
# Global Configuration Manager
# =============================================================================

class UnravelConfig:
    """
    Global configuration manager for unravel.

    Provides thread-local configuration with context manager support.
    Configuration can be set globally or locally within a context.

    Example:
        # Global configuration
        unravel.config.slice = SliceConfig(zero_take_is_default=False)

        # Local configuration (context manager)
        with unravel.config.local(cell=CellConfig(python_scalars=True)):
            values = list(unravel.enumerate_cells(m))
        # Back to global config
    """

    def __init__(self):
        self._global_slice = SliceConfig()
        self._global_cell = CellConfig()

        # Thread-local storage for context overrides
        self._local = threading.local()

        self._callbacks: Dict[str, List[Callable[[Any], None]]] = {
            name: [] for name in _SECTIONS
        }

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    @property
    def slice(self) -> SliceConfig:
        """Get slice configuration."""
        local = getattr(self._local, "slice", None)
        return local if local is not None else self._global_slice

    @slice.setter
    def slice(self, value: SliceConfig):
        """Set global slice configuration."""
        self._global_slice = value
        self._notify("slice", value)

    @property
    def cell(self) -> CellConfig:
        """Get cell configuration."""
        local = getattr(self._local, "cell", None)
        return local if local is not None else self._global_cell

    @cell.setter
    def cell(self, value: CellConfig):
        """Set global cell configuration."""
        self._global_cell = value
        self._notify("cell", value)

    # -------------------------------------------------------------------------
    # Convenience Properties
    # -------------------------------------------------------------------------

    @property
    def strict_slicing(self) -> bool:
        """Whether an explicit take of 0 is rejected."""
        return not self.slice.zero_take_is_default

    @property
    def python_scalars(self) -> bool:
        return self.cell.python_scalars

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (slice, cell)

        Returns:
            Context manager

        Raises:
            TypeError: If an unknown section name is given
        """
        unknown = set(kwargs) - set(_SECTIONS)
        if unknown:
            raise TypeError(f"Unknown configuration section(s): {sorted(unknown)}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs) -> Dict[str, Any]:
        """Set thread-local configuration, returning the values it replaced."""
        previous = {}
        for key, value in kwargs.items():
            previous[key] = getattr(self._local, key, None)
            if value is not None:
                setattr(self._local, key, value)
        return previous

    def _restore_local(self, previous: Dict[str, Any]):
        for key, value in previous.items():
            setattr(self._local, key, value)

    # -------------------------------------------------------------------------
    # Callback Registration
    # -------------------------------------------------------------------------

    def on_change(self, config_name: str, callback: Callable[[Any], None]):
        """
        Register callback for configuration changes.

        Args:
            config_name: Name of config section ("slice" or "cell")
            callback: Function called with the new section value
        """
        if config_name in self._callbacks:
            self._callbacks[config_name].append(callback)

    def _notify(self, config_name: str, value: Any):
        for callback in self._callbacks.get(config_name, []):
            try:
                callback(value)
            except Exception as e:
                logger.warning(f"Config callback for '{config_name}' failed: {e}")

    # -------------------------------------------------------------------------
    # Reset / Serialization
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults, dropping this thread's local overrides."""
        self._global_slice = SliceConfig()
        self._global_cell = CellConfig()
        for name in _SECTIONS:
            setattr(self._local, name, None)
        logger.info("Configuration reset to defaults")

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "slice": {
                "zero_take_is_default": self.slice.zero_take_is_default,
            },
            "cell": {
                "python_scalars": self.cell.python_scalars,
            },
        }

    def __repr__(self) -> str:
        return f"UnravelConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: UnravelConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._previous: Dict[str, Any] = {}

    def __enter__(self):
        self._previous = self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._restore_local(self._previous)
        return False


# =============================================================================
# Global Instance
# =============================================================================

config = UnravelConfig()


# =============================================================================
# Convenience Functions
# =============================================================================

def get_config() -> UnravelConfig:
    """Get the global configuration instance."""
    return config


def set_strict_slicing(enabled: bool = True):
    """
    Reject an explicit take of 0 instead of treating it as "full extent".

    With strict slicing only ``None`` leaves an axis unspecified.
    """
    config.slice = SliceConfig(zero_take_is_default=not enabled)


def set_python_scalars(enabled: bool = True):
    """Convert numpy scalars to Python scalars as they are read."""
    config.cell = CellConfig(python_scalars=enabled)


__all__ = [
    "SliceConfig",
    "CellConfig",
    "UnravelConfig",
    "config",
    "get_config",
    "set_strict_slicing",
    "set_python_scalars",
]
