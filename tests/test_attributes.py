"""Tests for logtree.attributes module."""
import logging

from logtree.attributes import UNSET, LoggerAttributes, apply_attributes


class TestLoggerAttributes:

    def test_defaults_are_unset(self):
        """Test nothing is provided by default."""
        attrs = LoggerAttributes()
        assert attrs.level is UNSET
        assert attrs.tracing is UNSET
        assert attrs.items() == []

    def test_from_mapping_keeps_known_keys(self):
        """Test known keys are taken from the mapping."""
        attrs = LoggerAttributes.from_mapping({'level': 'debug', 'tracing': True})
        assert attrs.items() == [('level', 'debug'), ('tracing', True)]

    def test_from_mapping_ignores_unknown_keys(self):
        """Test keys without a matching field are dropped."""
        attrs = LoggerAttributes.from_mapping({'no_such_attribute': 'ignore'})
        assert attrs == LoggerAttributes()

    def test_from_mapping_none(self):
        """Test None gives an empty instance."""
        assert LoggerAttributes.from_mapping(None) == LoggerAttributes()

    def test_none_is_provided(self):
        """Test None is a value (inherit), not a missing field."""
        attrs = LoggerAttributes.from_mapping({'tracing': None})
        assert attrs.items() == [('tracing', None)]


class TestApplyAttributes:

    def test_none_is_noop(self, registry):
        """Test applying None does nothing."""
        logger = registry.get('Test', level='debug')
        apply_attributes(logger, None)
        assert logger.level == logging.DEBUG

    def test_sets_matching_attribute(self, registry):
        """Test values with matching setters are applied."""
        logger = registry.get('Test')
        logger.tracing = False
        apply_attributes(logger, {'tracing': True})
        assert logger.tracing is True

    def test_ignores_unknown_attribute(self, registry):
        """Test unknown keys neither raise nor change anything."""
        logger = registry.get('Test', level='error', tracing=True)
        apply_attributes(logger, {'no_such_attribute': 'ignore'})
        assert logger.level == logging.ERROR
        assert logger.tracing is True
        assert not hasattr(logger, 'no_such_attribute')

    def test_accepts_dataclass(self, registry):
        """Test a LoggerAttributes instance is applied field by field."""
        logger = registry.get('Test', level='error')
        apply_attributes(logger, LoggerAttributes(tracing=True))
        assert logger.tracing is True
        assert logger.level == logging.ERROR

    def test_none_value_restores_inheritance(self, registry):
        """Test setting a field to None makes it inherit again."""
        registry.get('A', level='info')
        child = registry.get('A::B', level='fatal')
        apply_attributes(child, {'level': None})
        assert child.level == logging.INFO
