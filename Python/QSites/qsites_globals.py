"""
Centralized global singletons for the QSites package.

This module provides a SINGLE authoritative place where the shared objects of the
package are created exactly once per Python process. All other code should import
the accessors defined here instead of constructing new instances.

Provided Singletons
-------------------
- Global logger        : via `get_logger()` (stdlib `logging.Logger` named "QSites")
- Configuration        : via `get_config()` / `set_config()`
- Site-type catalog    : via `get_site_catalog()` (global handler catalog with the
                         built-in site types registered)
- RNG                  : via `get_numpy_rng()` / `reseed_all()` (used for index ids)

Usage Pattern
-------------
    from QSites.qsites_globals import get_logger, get_site_catalog

    log     = get_logger()
    catalog = get_site_catalog()

Design Notes
------------
Built-in site types are imported lazily on the first call to `get_site_catalog()`
so importing just the top-level `QSites` package remains lightweight.

!IMPORTANT: Do NOT perform side effects at module import other than creating
!lightweight sentinels; heavy initialization is deferred until first access.
"""

from __future__ import annotations

import importlib
import logging
import threading
from typing import Any, Optional

import numpy as np

from .qsites_config import QSitesConfig

# Lock guarding lazy creation of the singletons
_LOCK                   = threading.RLock()

# Internal storage for singletons
_LOGGER: Any            = None
_CONFIG: Any            = None
_RNG: Any               = None
_BUILTINS_LOADED: bool  = False

LOGGER_NAME             = "QSites"

#: extension modules registering the built-in site types
BUILTIN_SITE_TYPE_MODULES = (
    "QSites.Algebra.Operator.operators_generic",
    "QSites.Algebra.Operator.operators_spin",
    "QSites.Algebra.Operator.operators_spin_1",
    "QSites.Algebra.Operator.operators_spinless_fermions",
    "QSites.Algebra.Operator.operators_bosons",
)

# ----------------------------------------------------------------

def get_config() -> QSitesConfig:
    """
    Return the process-global configuration (read from the environment on first use).
    """
    global _CONFIG
    if _CONFIG is not None:
        return _CONFIG
    with _LOCK:
        if _CONFIG is None:
            _CONFIG = QSitesConfig.from_env()
    return _CONFIG

def set_config(config: Optional[QSitesConfig] = None, **updates: Any) -> QSitesConfig:
    """
    Replace the global configuration, or update selected fields of it.

    Returns the previous configuration so callers can restore it.
    """
    global _CONFIG
    with _LOCK:
        previous    = get_config()
        new         = config if config is not None else previous
        if updates:
            new = new.with_override(**updates)
        _CONFIG     = new
        if _LOGGER is not None:
            _LOGGER.setLevel(new.log_level)
    return previous

# ----------------------------------------------------------------

def get_logger(**kwargs) -> logging.Logger:
    """
    Return the process-global logger instance.

    Parameters
    ----------
    **kwargs : dict
        Optional ``level`` and ``fmt`` used the first time the logger is created.
    """
    global _LOGGER
    if _LOGGER is not None:
        return _LOGGER
    with _LOCK:
        if _LOGGER is None:
            logger = logging.getLogger(LOGGER_NAME)
            if not logger.handlers:
                handler = logging.StreamHandler()
                handler.setFormatter(logging.Formatter(kwargs.get("fmt", "[%(asctime)s] %(name)s %(levelname)s: %(message)s")))
                logger.addHandler(handler)
            logger.setLevel(kwargs.get("level", get_config().log_level))
            _LOGGER = logger
    return _LOGGER

# ----------------------------------------------------------------

def get_numpy_rng() -> np.random.Generator:
    """Return the NumPy Generator used for index identities."""
    global _RNG
    if _RNG is not None:
        return _RNG
    with _LOCK:
        if _RNG is None:
            _RNG = np.random.default_rng()
    return _RNG

def reseed_all(seed: Optional[int]) -> np.random.Generator:
    """Reseed the global NumPy Generator; returns the new generator."""
    global _RNG
    with _LOCK:
        _RNG = np.random.default_rng(seed)
    return _RNG

# ----------------------------------------------------------------

def load_builtin_site_types() -> None:
    """
    Import the built-in site-type modules; each registers its handlers on import.
    """
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    with _LOCK:
        if _BUILTINS_LOADED:
            return
        for module in BUILTIN_SITE_TYPE_MODULES:
            importlib.import_module(module)
        _BUILTINS_LOADED = True
        get_logger().debug(f"Loaded built-in site types: {', '.join(m.rsplit('.', 1)[-1] for m in BUILTIN_SITE_TYPE_MODULES)}")

def get_site_catalog():
    """
    Return the global site-type catalog, registering the built-in site types first
    unless disabled by the configuration.
    """
    from QSites.Algebra.SiteType.catalog import SITE_CATALOG
    if not _BUILTINS_LOADED and get_config().load_builtins:
        load_builtin_site_types()
    return SITE_CATALOG

# ----------------------------------------------------------------

__all__ = [
    "get_logger",
    "get_config",
    "set_config",
    "get_numpy_rng",
    "reseed_all",
    "get_site_catalog",
    "load_builtin_site_types",
]

# ----------------------------------------------------------------
#! End of QSites global singletons
