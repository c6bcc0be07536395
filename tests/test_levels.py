"""Tests for logtree.levels module."""
import logging

import pytest

from logtree.levels import Severity, level_name, to_levelno


class TestToLevelno:

    @pytest.mark.parametrize(('level', 'expected'), [
        ('debug', logging.DEBUG),
        ('INFO', logging.INFO),
        ('warn', logging.WARNING),
        ('warning', logging.WARNING),
        ('error', logging.ERROR),
        ('fatal', logging.FATAL),
        ('critical', logging.CRITICAL),
        ('trace', 5),
    ])
    def test_names(self, level, expected):
        """Test level names in any case, with warn/fatal aliases."""
        assert to_levelno(level) == expected

    @pytest.mark.parametrize('constant', [
        logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.FATAL,
    ])
    def test_stdlib_constants(self, constant):
        """Test stdlib logging constants pass through."""
        assert to_levelno(constant) == constant

    def test_severity(self):
        """Test Severity members resolve to loguru numbers."""
        assert to_levelno(Severity.WARN) == logging.WARNING
        assert to_levelno(Severity.FATAL) == logging.CRITICAL

    def test_none_means_inherit(self):
        """Test None passes through."""
        assert to_levelno(None) is None

    def test_unknown_name_raises(self):
        """Test an unknown level name raises ValueError."""
        with pytest.raises(ValueError):
            to_levelno('loud')

    @pytest.mark.parametrize('bad', [True, 1.5, object()])
    def test_bad_type_raises(self, bad):
        """Test unsupported types raise TypeError."""
        with pytest.raises(TypeError):
            to_levelno(bad)


class TestLevelName:

    def test_known(self):
        """Test facade severities map back to loguru names."""
        assert level_name(logging.WARNING) == 'WARNING'
        assert level_name(logging.CRITICAL) == 'CRITICAL'

    def test_unknown(self):
        """Test other numbers fall back to stdlib naming."""
        assert level_name(33) == 'Level 33'
