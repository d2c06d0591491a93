"""
Tests for the configuration dataclass and the session context manager.

----------------------------------------------------------------------------
File        : Python/test/test_session.py
Author      : Maksymilian Kliczkowski
Date        : 14.11.2025
----------------------------------------------------------------------------
run: pytest Python/test/test_session.py
"""

import logging

import numpy as np
import pytest

from QSites.qsites_config import QSitesConfig
from QSites.qsites_globals import get_config, get_logger
from QSites.session import QSitesSession, run

# ----------------------------------------------------------------------------
#! Config
# ----------------------------------------------------------------------------


class TestConfig:
    """QSitesConfig parsing and overrides."""

    def test_defaults(self):
        cfg = QSitesConfig()
        assert cfg.log_level == "WARNING"
        assert cfg.load_builtins is True
        assert cfg.dtype is np.float64
        assert cfg.complex_dtype is np.complex128

    def test_from_env(self):
        env = {
            "QSITES_LOG_LEVEL"      : "debug",
            "QSITES_LOAD_BUILTINS"  : "0",
            "QSITES_FLOATING_POINT" : "float32",
        }
        cfg = QSitesConfig.from_env(env)
        assert cfg.log_level == "DEBUG"
        assert cfg.load_builtins is False
        assert cfg.dtype is np.float32

    def test_from_empty_env_is_default(self):
        assert QSitesConfig.from_env({}) == QSitesConfig()

    def test_with_override_is_a_copy(self):
        cfg     = QSitesConfig()
        other   = cfg.with_override(dtype=np.float32)
        assert other.dtype is np.float32
        assert cfg.dtype is np.float64

    @pytest.mark.parametrize("kwargs", [{"dtype": "float16"}, {"dtype": "int"}, {"log_level": "LOUD"}])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            QSitesConfig(**kwargs)


# ----------------------------------------------------------------------------
#! Session
# ----------------------------------------------------------------------------


class TestSession:
    """QSitesSession applies and restores the global configuration."""

    def test_context_manager_restores_config(self):
        before = get_config()
        with run(precision="float32", log_level="DEBUG") as session:
            assert isinstance(session, QSitesSession)
            assert get_config().dtype is np.float32
            assert get_logger().level == logging.DEBUG
        assert get_config() is before
        assert get_logger().level == logging.getLevelName(before.log_level)

    def test_session_precision_reaches_builtin_operators(self):
        import QSites

        with QSites.run(precision="float32"):
            s   = QSites.siteind("S=1/2")
            Sz  = QSites.op("Sz", s)
            Sy  = QSites.op("Sy", s)
        assert Sz.dtype == np.float32
        assert Sy.dtype == np.complex64
        assert QSites.op("Sz", s).dtype == get_config().dtype

    def test_seed_makes_ids_reproducible(self):
        from QSites.Algebra.Hilbert.site_index import SiteIndex

        with QSitesSession(seed=7):
            a = SiteIndex.create(2).id
        with QSitesSession(seed=7):
            b = SiteIndex.create(2).id
        assert a == b

    def test_restored_on_exception(self):
        before = get_config()
        with pytest.raises(RuntimeError):
            with run(precision="float32"):
                raise RuntimeError("boom")
        assert get_config() is before

    def test_explicit_start_stop(self):
        before  = get_config()
        session = QSitesSession(log_level="ERROR").start()
        assert get_config().log_level == "ERROR"
        session.stop()
        assert get_config() is before
        # stopping twice is harmless
        session.stop()
        assert get_config() is before
