"""
QSites Session Management
=========================

This module provides a high-level API for temporarily configuring the package:
logging verbosity, the floating point type of built-in operators and the seed of
the random generator used for index identities.

Usage
-----
    import QSites

    # Using context manager (recommended)
    with QSites.run(seed=42, precision='float32', log_level='DEBUG'):
        s  = QSites.siteind("S=1/2")
        Sz = QSites.op("Sz", s)

    # Or creating a session object
    session = QSites.QSitesSession(seed=123)
    session.start()
    # ...
    session.stop()
"""

from typing import Literal, Optional

from .qsites_config import QSitesConfig
from .qsites_globals import get_logger, reseed_all, set_config


class QSitesSession:
    """
    Applies a configuration to the global state and restores the previous one on stop.

    Parameters
    ----------
    seed : int, optional
        Seed of the generator used for index identities. ``None`` leaves it untouched.
    precision : {'float32', 'float64'}, optional
        Floating point type of built-in operator matrices. ``None`` keeps the current one.
    log_level : str, optional
        Level of the ``QSites`` logger. ``None`` keeps the current one.

    Examples
    --------
    >>> with QSitesSession(seed=7, log_level="DEBUG"):
    ...     sites = siteinds("S=1/2", 4)
    """

    def __init__(self,
                 seed: Optional[int] = None,
                 precision: Optional[Literal['float32', 'float64']] = None,
                 log_level: Optional[str] = None):
        self._seed = seed
        self._precision = precision
        self._log_level = log_level
        self._previous: Optional[QSitesConfig] = None

    def start(self) -> 'QSitesSession':
        """
        Apply the session configuration to the global state.

        Returns
        -------
        QSitesSession
            The started session instance.
        """
        updates = {}
        if self._precision is not None:
            updates["dtype"] = self._precision
        if self._log_level is not None:
            updates["log_level"] = self._log_level

        self._previous = set_config(**updates)
        if self._seed is not None:
            reseed_all(self._seed)
        get_logger().info(f"Starting QSitesSession(seed={self._seed}, precision={self._precision}, log_level={self._log_level})")
        return self

    def stop(self) -> None:
        """
        Restore the configuration that was active before :meth:`start`.
        """
        get_logger().info("Stopping QSitesSession")
        if self._previous is not None:
            set_config(self._previous)
            self._previous = None

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()


def run(seed: Optional[int] = None,
        precision: Optional[Literal['float32', 'float64']] = None,
        log_level: Optional[str] = None) -> QSitesSession:
    """
    Context manager running a block of code with a specific QSites configuration.

    Returns
    -------
    QSitesSession
        The (not yet started) session; entering the ``with`` block starts it.
    """
    return QSitesSession(seed=seed, precision=precision, log_level=log_level)
