import pytest
from loguru import logger as _loguru

from logtree._backend import Channel, context, get_backend
from logtree.registry import LoggerRegistry


@pytest.fixture(autouse=True)
def clean_context():
    """Each test starts and ends with an empty context store."""
    context.clear()
    yield
    context.clear()


@pytest.fixture
def registry():
    """Fresh registry with private channels, isolated from the global one."""
    return LoggerRegistry(
        namespace='python',
        default_level='WARNING',
        default_tracing=False,
        channel_factory=Channel,
    )


@pytest.fixture
def records():
    """Records emitted through loguru while the test runs."""
    captured = []
    backend = get_backend()
    sink_id = backend.add_sink(lambda message: captured.append(message.record),
                               level='TRACE', format='{message}')
    yield captured
    backend.remove_sink(sink_id)
    _loguru.complete()
