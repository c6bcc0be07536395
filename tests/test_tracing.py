"""Tests for logtree.tracing module."""
import inspect

import pytest

from logtree._backend import context
from logtree.tracing import CONTEXT_KEYS, call_site, caller_context


def _inner(internal):
    return call_site(internal)


def _outer(internal):
    return _inner(internal)


class TestCallSite:

    def test_no_internal_files(self):
        """Test the caller itself is returned when nothing is skipped."""
        frame, depth = call_site(frozenset())
        assert frame.f_code.co_name == 'test_no_internal_files'
        assert depth == 0

    def test_skips_internal_frames(self):
        """Test frames from internal files are skipped and counted."""
        frame, depth = _outer(frozenset({__file__}))
        # _inner, _outer and this test all live in this file
        assert frame is not None
        assert frame.f_code.co_filename != __file__
        assert depth == 3

    def test_returns_first_external_frame(self):
        """Test the frame right above internal code is the result."""
        frame, depth = _inner(frozenset())
        assert frame.f_code.co_name == '_inner'
        assert depth == 0


class TestCallerContext:

    def test_sets_metadata_for_duration(self):
        """Test file, line and method are present inside the block only."""
        frame = inspect.currentframe()
        line = frame.f_lineno + 1
        with caller_context(context, frame):
            assert context.get('file_name') == __file__
            assert context.get('line_number') == str(line)
            assert context.get('method_name') == 'test_sets_metadata_for_duration'

        for key in CONTEXT_KEYS:
            assert context.get(key) is None

    def test_blank_values_without_frame(self):
        """Test blank placeholders are used when no frame is given."""
        with caller_context(context, None):
            for key in CONTEXT_KEYS:
                assert context.get(key) == ''

        for key in CONTEXT_KEYS:
            assert context.get(key) is None

    def test_removed_on_exception(self):
        """Test the keys are removed when the block raises."""
        with pytest.raises(RuntimeError):
            with caller_context(context, inspect.currentframe()):
                raise RuntimeError('emit failed')

        for key in CONTEXT_KEYS:
            assert context.get(key) is None

    def test_restores_outer_values(self):
        """Test nested scopes restore the enclosing scope's values."""
        with caller_context(context, inspect.currentframe()):
            outer_line = context.get('line_number')
            with caller_context(context, None):
                assert context.get('line_number') == ''
            assert context.get('line_number') == outer_line

    def test_leaves_other_keys_alone(self):
        """Test unrelated keys survive the scope."""
        context.put('request_id', 'abc')
        with caller_context(context, None):
            pass
        assert context.get('request_id') == 'abc'
