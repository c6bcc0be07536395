import os
from types import SimpleNamespace


def _flag(name: str) -> bool:
    return os.getenv(name, '').lower() in {'1', 'true', 'yes'}


# Naming
naming = SimpleNamespace()
naming.namespace = os.getenv('CONFIG_LOGTREE_NAMESPACE', '').strip('.') or 'python'

# Root logger defaults
root = SimpleNamespace()
root.level = os.getenv('CONFIG_LOGTREE_ROOT_LEVEL', '').upper() or 'WARNING'
root.tracing = _flag('CONFIG_LOGTREE_TRACING')

# Console sink
log = SimpleNamespace()
log.enable_diagnose = _flag('CONFIG_LOGTREE_DIAGNOSE')
