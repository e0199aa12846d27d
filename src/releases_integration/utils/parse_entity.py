"""Helpers for reading optional fields out of parsed release entities.

Release payloads routinely omit fields or carry explicit nulls. Reading a chain
such as ``release.tender.value.amount`` then fails somewhere in the middle with
an ``AttributeError`` on ``None``. :func:`resolve` turns exactly that kind of
failure into ``None`` and lets every other exception through untouched.

:func:`dig` is the explicit alternative: it walks a path step by step and stops
at the first ``None`` without relying on exceptions at all.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NONE_OPERAND_MESSAGE = re.compile(
    r"^(?:'NoneType' object is not (?:subscriptable|iterable|callable)"
    r"|argument of type 'NoneType' is not (?:a container or )?iterable"
    r"|object of type 'NoneType' has no len\(\)"
    r"|cannot unpack non-iterable NoneType object)"
)


def is_null_dereference(exc: BaseException) -> bool:
    """Return True if ``exc`` was raised by touching ``None``.

    Only interpreter-raised faults qualify: an ``AttributeError`` looked up on
    ``None`` (``name`` set, ``obj`` is ``None``) or a ``TypeError`` whose
    message names ``NoneType`` as the operand. Hand-raised errors and failures
    on real objects do not.
    """

    if isinstance(exc, AttributeError):
        return exc.name is not None and exc.obj is None
    if isinstance(exc, TypeError):
        return bool(exc.args) and bool(_NONE_OPERAND_MESSAGE.match(str(exc.args[0])))
    return False


def resolve(resolver: Callable[[], T | None]) -> T | None:
    """Run ``resolver`` once and return its value, or None if it is absent.

    Args:
        resolver: Zero-argument callable, typically a lambda reading a chain of
            fields from an entity.

    Returns:
        The resolver's value when it is not None. None when the resolver
        returned None or failed by dereferencing None.

    Raises:
        Exception: Anything else the resolver raises, unchanged.
    """

    try:
        return resolver()
    except (AttributeError, TypeError) as e:
        if not is_null_dereference(e):
            raise
        logger.debug("Resolved to absent value", extra={"reason": str(e)})
        return None


def dig(source: Any, *path: str | int) -> Any | None:
    """Follow ``path`` from ``source``, stopping at the first None.

    String steps are looked up with ``.get`` on mappings and as attributes on
    anything else; integer steps index into sequences. Missing mapping keys
    count as absent. Missing attributes and out-of-range indexes raise.
    """

    current = source
    for step in path:
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(step)
        elif isinstance(step, int):
            if not isinstance(current, Sequence) or isinstance(current, str):
                raise TypeError(f"cannot index {type(current).__name__!r} with {step!r}")
            current = current[step]
        else:
            current = getattr(current, step)
    return current
