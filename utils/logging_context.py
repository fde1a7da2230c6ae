"""Attach wizard session, step and operation to every log record."""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator

_UNSET = "-"
DEFAULT_LOG_FORMAT = (
    "%(asctime)s %(levelname)s [session=%(session_id)s step=%(wizard_step)s "
    "op=%(operation)s] %(name)s: %(message)s"
)


@dataclass(frozen=True)
class WizardLogContext:
    """Values stamped onto log records emitted while the wizard works."""

    session_id: str = _UNSET
    wizard_step: str = _UNSET
    operation: str = _UNSET


_context_var: contextvars.ContextVar[WizardLogContext] = contextvars.ContextVar(
    "wizard_log_context", default=WizardLogContext()
)
_base_factory = logging.getLogRecordFactory()
_factory_installed = False


def _clean(value: str | None) -> str:
    if value is None:
        return _UNSET
    return value.strip() or _UNSET


def current_context() -> WizardLogContext:
    return _context_var.get()


def _stamp(record: logging.LogRecord) -> logging.LogRecord:
    context = _context_var.get()
    for name in ("session_id", "wizard_step", "operation"):
        if not hasattr(record, name):
            setattr(record, name, getattr(context, name))
    return record


class WizardContextFilter(logging.Filter):
    """Fill the context fields on records created before the factory existed."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        _stamp(record)
        return True


def _contextual_factory(*args: object, **kwargs: object) -> logging.LogRecord:
    return _stamp(_base_factory(*args, **kwargs))


def configure_logging(*, level: int = logging.INFO) -> None:
    """Install the context-aware record factory and the default format.

    Safe to call repeatedly; existing handlers keep their formatters.
    """

    global _factory_installed
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=DEFAULT_LOG_FORMAT)
    else:
        root.setLevel(level)
    if not any(isinstance(flt, WizardContextFilter) for flt in root.filters):
        root.addFilter(WizardContextFilter())
    if not _factory_installed:
        logging.setLogRecordFactory(_contextual_factory)
        _factory_installed = True


def set_session_id(session_id: str | None) -> None:
    """Bind ``session_id`` for the rest of the current context."""

    configure_logging()
    _context_var.set(replace(_context_var.get(), session_id=_clean(session_id)))


@contextmanager
def log_context(
    *,
    session_id: str | None = None,
    wizard_step: str | None = None,
    operation: str | None = None,
) -> Iterator[WizardLogContext]:
    """Override the given fields inside the ``with`` block; ``None`` keeps the outer value."""

    outer = _context_var.get()
    changes = {
        name: _clean(value)
        for name, value in (("session_id", session_id), ("wizard_step", wizard_step), ("operation", operation))
        if value is not None
    }
    inner = replace(outer, **changes)
    token = _context_var.set(inner)
    try:
        yield inner
    finally:
        _context_var.reset(token)


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "WizardContextFilter",
    "WizardLogContext",
    "configure_logging",
    "current_context",
    "log_context",
    "set_session_id",
]
