# memograph/core/config.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Optional

import numpy as np


@dataclass(frozen=True)
class GraphConfig:
    """
    Numeric and logging settings shared by every node.

    Attributes
    ----------
    dtype : numpy scalar type
        Scalar type values are stored and computed in. Defaults to float32
        (IEEE-754 single precision).
    fp_errors : str
        Policy handed to `np.errstate(all=...)` while an operator runs.
        "ignore" lets NaN / inf come back as ordinary results; "raise" turns
        them into FloatingPointError.
    log_level : int
        Level applied by `get_logger()` to the package logger.
    """
    dtype: Any = np.float32
    fp_errors: str = "ignore"
    log_level: int = logging.WARNING

    def coerce(self, value) -> Any:
        """Convert a plain number (or numpy scalar) to the configured dtype."""
        return self.dtype(value)

    def errstate(self):
        return np.errstate(all=self.fp_errors)


# Process-wide default, swapped by use_config()
global_config = GraphConfig()


@contextmanager
def use_config(config: Optional[GraphConfig] = None, **overrides):
    """
    Context manager to temporarily change the active configuration:
        with use_config(fp_errors="raise"):
            ... build / compute ...
    """
    from . import config as _config_mod  # module access so callers see the swap
    prev = _config_mod.global_config
    try:
        _config_mod.global_config = replace(config or prev, **overrides)
        yield _config_mod.global_config
    finally:
        _config_mod.global_config = prev


def get_config() -> GraphConfig:
    from . import config as _config_mod
    return _config_mod.global_config
