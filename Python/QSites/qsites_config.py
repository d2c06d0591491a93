"""
Declarative configuration of the QSites package.

The :class:`QSitesConfig` dataclass packages the few process-wide settings of the
site-type system: logging verbosity, whether the built-in site types are
registered on first use, and the default floating point type of the operator
matrices they build. Defaults can be taken from the environment:

- ``QSITES_LOG_LEVEL``       : logging level name (``DEBUG``, ``INFO``, ...)
- ``QSITES_LOAD_BUILTINS``   : ``"1"`` (default) or ``"0"``
- ``QSITES_FLOATING_POINT``  : ``"float64"`` (default) or ``"float32"``
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

import numpy as np

_FLOAT_TYPES = {
    "float32": np.float32,
    "float64": np.float64,
}

_TRUE_VALUES = ("1", "true", "yes", "on")


def _parse_dtype(value: Any) -> type:
    if isinstance(value, str):
        try:
            return _FLOAT_TYPES[value.strip().lower()]
        except KeyError as exc:
            raise ValueError(f"Unsupported floating point type '{value}'. Valid: {sorted(_FLOAT_TYPES)}") from exc
    dtype = np.dtype(value).type
    if dtype not in _FLOAT_TYPES.values():
        raise ValueError(f"Unsupported floating point type {value!r}. Valid: {sorted(_FLOAT_TYPES)}")
    return dtype


def _parse_level(value: Any) -> str:
    if isinstance(value, int):
        return logging.getLevelName(value)
    name = str(value).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown logging level '{value}'.")
    return name


@dataclass(frozen=True)
class QSitesConfig:
    """
    Process-wide settings.

    Parameters
    ----------
    log_level:
        Level of the ``QSites`` logger.
    load_builtins:
        Register the built-in site types (``S=1/2``, ``S=1``, ``Fermion``, ``Boson``,
        ``Qudit`` and the generic ``Id``) when the global catalog is first used.
    dtype:
        Real floating point type of built-in operator matrices; complex operators use
        the matching complex type.
    """

    log_level: str = "WARNING"
    load_builtins: bool = True
    dtype: type = np.float64

    def __post_init__(self):
        object.__setattr__(self, "log_level", _parse_level(self.log_level))
        object.__setattr__(self, "dtype", _parse_dtype(self.dtype))
        object.__setattr__(self, "load_builtins", bool(self.load_builtins))

    @property
    def complex_dtype(self) -> type:
        return np.complex64 if self.dtype is np.float32 else np.complex128

    def with_override(self, **updates: Any) -> "QSitesConfig":
        """
        Return a new config instance with selected fields replaced.
        """
        return replace(self, **updates)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "QSitesConfig":
        """
        Build the configuration from ``QSITES_*`` environment variables.
        """
        env     = os.environ if environ is None else environ
        kwargs  = {}
        if "QSITES_LOG_LEVEL" in env:
            kwargs["log_level"]     = env["QSITES_LOG_LEVEL"]
        if "QSITES_LOAD_BUILTINS" in env:
            kwargs["load_builtins"] = env["QSITES_LOAD_BUILTINS"].strip().lower() in _TRUE_VALUES
        if "QSITES_FLOATING_POINT" in env:
            kwargs["dtype"]         = env["QSITES_FLOATING_POINT"]
        return cls(**kwargs)


__all__ = ["QSitesConfig"]
