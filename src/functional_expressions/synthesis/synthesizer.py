"""Synthesis of named callables from Python statement strings."""

import contextlib
import logging
import textwrap
from types import TracebackType
from typing import Any, Callable, Iterator, Sequence

from functional_expressions.structs import (
    Expression,
    ReleasedCallableError,
    UsageError,
)
from functional_expressions.synthesis.counter import GLOBAL_COUNTER, NamingCounter
from functional_expressions.synthesis.primitives import create_primitives


class SynthesizedCallable:
    """A callable unit built from statement strings.

    The unit is compiled on first call, so malformed statements surface
    as a ``SyntaxError`` from the call rather than from synthesis. Made a
    class to have a stable name, a readable source and an explicit
    release.
    """

    def __init__(
        self,
        name: str,
        params: tuple[str, ...],
        statements: tuple[str, ...],
        namespace: dict[str, Any],
        on_release: Callable[[str], None],
    ) -> None:
        self.name = name
        self.params = params
        self.statements = statements
        self.compiled_func: Callable[..., Any] | None = None
        self.released = False
        self._namespace = namespace
        self._on_release = on_release

    @property
    def source(self) -> str:
        """The function definition this unit compiles to."""
        lines: list[str] = []
        for statement in self.statements:
            # Multi-line strings are self-contained blocks; single lines keep
            # their indentation so a compound statement can span strings.
            if "\n" in statement:
                statement = textwrap.dedent(statement).strip("\n")
            lines.append(statement.rstrip())
        body = textwrap.dedent("\n".join(lines)) if lines else "pass"
        header = f"def {self.name}({', '.join(self.params)}):"
        return f"{header}\n{textwrap.indent(body, '    ')}\n"

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.released:
            raise ReleasedCallableError(f"{self.name} has been released")
        if self.compiled_func is None:
            code = compile(self.source, f"<{self.name}>", "exec")
            local_namespace: dict[str, Any] = {}
            # Each unit gets its own globals so rebinding stays local to it.
            global_namespace = dict(self._namespace)
            exec(code, global_namespace, local_namespace)  # pylint: disable=exec-used
            self.compiled_func = local_namespace[self.name]
        return self.compiled_func(*args, **kwargs)

    def release(self) -> None:
        """Unregister the unit and drop its compiled function."""
        if self.released:
            return
        self.released = True
        self.compiled_func = None
        self._on_release(self.name)

    def __enter__(self) -> "SynthesizedCallable":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else "live"
        return f"SynthesizedCallable({self.name!r}, {state})"


class CallableSynthesizer:
    """Creates uniquely named callables and tracks the live ones.

    Every unit is registered under its name in :attr:`scope` until it is
    released, so ``live_count`` tells whether callers clean up after
    themselves.
    """

    def __init__(
        self,
        primitives: dict[str, Any] | None = None,
        name_prefix: str = "_lambda_",
        counter: NamingCounter | None = None,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            primitives: Globals namespace for synthesized units (defaults
                to :func:`create_primitives`)
            name_prefix: Prefix of every unit name
            counter: Id source (defaults to the process-wide counter)

        Raises:
            ValueError: If the prefix cannot start a Python identifier
        """
        if not f"{name_prefix}0".isidentifier():
            raise ValueError(f"Invalid name prefix: {name_prefix!r}")
        self.primitives = (
            create_primitives() if primitives is None else dict(primitives)
        )
        self.name_prefix = name_prefix
        self.scope: dict[str, SynthesizedCallable] = {}
        self.created_count = 0
        self._counter = GLOBAL_COUNTER if counter is None else counter

    @property
    def live_count(self) -> int:
        """Number of units synthesized and not yet released."""
        return len(self.scope)

    def synthesize(
        self, *statements: str, params: Sequence[str] = ()
    ) -> SynthesizedCallable:
        """Create a unit whose body runs ``statements`` in order."""
        name = f"{self.name_prefix}{self._counter.next_id()}"
        unit = SynthesizedCallable(
            name, tuple(params), tuple(statements), self.primitives, self._unregister
        )
        self.scope[name] = unit
        self.created_count += 1
        logging.debug(f"Synthesized {name}({', '.join(unit.params)})")
        return unit

    def _unregister(self, name: str) -> None:
        self.scope.pop(name, None)
        logging.debug(f"Released {name}")


_default_synthesizer: CallableSynthesizer | None = None


def get_default_synthesizer() -> CallableSynthesizer:
    """Return the process default synthesizer, creating it on first use."""
    global _default_synthesizer  # pylint: disable=global-statement
    if _default_synthesizer is None:
        _default_synthesizer = CallableSynthesizer()
    return _default_synthesizer


def set_default_synthesizer(synthesizer: CallableSynthesizer | None) -> None:
    """Replace the process default synthesizer (None restores lazy creation)."""
    global _default_synthesizer  # pylint: disable=global-statement
    _default_synthesizer = synthesizer


@contextlib.contextmanager
def expression_callable(
    expression: Expression,
    params: Sequence[str],
    preamble: Sequence[str] = (),
    synthesizer: CallableSynthesizer | None = None,
) -> Iterator[Callable[..., Any]]:
    """Yield a callable for ``expression`` and release it on exit.

    Native callables are yielded as they are. Strings become the return
    statement of a synthesized unit taking ``params``, run after the
    ``preamble`` statements.
    """
    if callable(expression):
        yield expression
        return
    if not isinstance(expression, str):
        raise UsageError(
            f"Expected an expression string or a callable, "
            f"got {type(expression).__name__}"
        )
    if synthesizer is None:
        synthesizer = get_default_synthesizer()
    with synthesizer.synthesize(
        *preamble, f"return {expression}", params=params
    ) as unit:
        yield unit
