"""Public entry point for callers who want a reusable synthesized callable."""

from typing import Sequence

from functional_expressions.structs import UsageError
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    SynthesizedCallable,
    get_default_synthesizer,
)


def lambda_(
    *statements: str,
    params: Sequence[str] = ("*args", "**kwargs"),
    synthesizer: CallableSynthesizer | None = None,
) -> SynthesizedCallable:
    """Synthesize a callable from ``statements``.

    The caller owns the returned handle and must release it, either with
    ``release()`` or by using it as a context manager::

        with lambda_("return args[0] * 2") as double:
            double(21)  # 42

    By default positional arguments are available as ``args`` and keyword
    arguments as ``kwargs``; pass ``params`` to name them instead.
    """
    if not statements:
        raise UsageError("lambda_ requires at least one statement")
    if synthesizer is None:
        synthesizer = get_default_synthesizer()
    return synthesizer.synthesize(*statements, params=params)
