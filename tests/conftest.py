import logging

import pytest

from logfacade.config import settings as settings_module
from logfacade.core import runtime
from logfacade.sinks import MemorySink


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch):
    """Each test starts with an uninitialized facade and fresh settings."""
    monkeypatch.setattr(runtime, "_runtime", None)
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.delenv("LOGFACADE_IS_PRODUCTION_ENV", raising=False)
    monkeypatch.delenv("LOGFACADE_MESSAGE_CONNECTOR", raising=False)


@pytest.fixture
def sink() -> MemorySink:
    return MemorySink()


@pytest.fixture
def make_logger(sink):
    def _make(production: bool = False, **options):
        runtime.init(is_production_env=production)
        options.setdefault("sink", sink)
        return runtime.create(filename="app/service.py", **options)

    return _make


@pytest.fixture
def facade_logger_state():
    """Restore the 'logfacade' stdlib logger after configure_logging tests."""
    app_logger = logging.getLogger("logfacade")
    handlers = app_logger.handlers[:]
    level = app_logger.level
    propagate = app_logger.propagate
    yield app_logger
    app_logger.handlers[:] = handlers
    app_logger.setLevel(level)
    app_logger.propagate = propagate
