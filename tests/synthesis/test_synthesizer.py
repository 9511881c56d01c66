"""Tests for CallableSynthesizer and SynthesizedCallable."""

import numpy as np
import pytest

from functional_expressions.operations.map_engine import map
from functional_expressions.structs import ReleasedCallableError, UsageError
from functional_expressions.synthesis.counter import NamingCounter
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    expression_callable,
    get_default_synthesizer,
    set_default_synthesizer,
)


def test_synthesize_runs_statements_in_order(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test statements run in sequence and the last one returns."""
    unit = synthesizer.synthesize("y = x * 2", "y += 1", "return y", params=["x"])
    assert unit(3) == 7
    unit.release()


def test_synthesize_names_are_unique(synthesizer: CallableSynthesizer) -> None:
    """Test each unit gets its own name and registers under it."""
    first = synthesizer.synthesize("return 1")
    second = synthesizer.synthesize("return 2")
    assert first.name != second.name
    assert first.name.startswith("_lambda_")
    assert synthesizer.scope == {first.name: first, second.name: second}
    first.release()
    second.release()


def test_synthesize_uses_given_counter() -> None:
    """Test names come from the counter and prefix."""
    synthesizer = CallableSynthesizer(
        name_prefix="fn_", counter=NamingCounter(lambda: 7)
    )
    assert synthesizer.synthesize("return 0").name == "fn_7"
    assert synthesizer.synthesize("return 0").name == "fn_8"


def test_invalid_name_prefix() -> None:
    """Test a prefix that cannot start an identifier is rejected."""
    with pytest.raises(ValueError):
        CallableSynthesizer(name_prefix="1-bad")


def test_release_unregisters(synthesizer: CallableSynthesizer) -> None:
    """Test release removes the unit and is idempotent."""
    unit = synthesizer.synthesize("return 1")
    assert synthesizer.live_count == 1
    assert unit() == 1
    unit.release()
    unit.release()
    assert synthesizer.live_count == 0
    assert unit.released
    assert unit.compiled_func is None
    assert "released" in repr(unit)


def test_released_unit_cannot_be_called(synthesizer: CallableSynthesizer) -> None:
    """Test calling a released unit raises."""
    unit = synthesizer.synthesize("return 1")
    unit.release()
    with pytest.raises(ReleasedCallableError):
        unit()


def test_context_manager_releases_on_error(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test leaving a with block releases even when an error propagates."""
    with pytest.raises(ZeroDivisionError):
        with synthesizer.synthesize("return 1 / 0") as unit:
            unit()
    assert unit.released
    assert synthesizer.live_count == 0


def test_malformed_statement_fails_on_call(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test syntax errors are deferred until the unit is invoked."""
    unit = synthesizer.synthesize("return invalid_syntax[")
    assert unit.compiled_func is None
    with pytest.raises(SyntaxError):
        unit()
    unit.release()


def test_compiled_once(synthesizer: CallableSynthesizer) -> None:
    """Test the unit is compiled on first call and cached."""
    unit = synthesizer.synthesize("return a + b", params=("a", "b"))
    assert unit.compiled_func is None
    assert unit(1, 2) == 3
    compiled = unit.compiled_func
    assert compiled is not None
    assert unit(3, 4) == 7
    assert unit.compiled_func is compiled
    unit.release()


def test_source_indents_multiline_statements(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test multi-line statements become an indented body."""
    unit = synthesizer.synthesize(
        """
        if x > 0:
            return "positive"
        """,
        "return 'other'",
        params=["x"],
    )
    assert unit.source == (
        f"def {unit.name}(x):\n"
        "    if x > 0:\n"
        '        return "positive"\n'
        "    return 'other'\n"
    )
    assert unit(1) == "positive"
    assert unit(-1) == "other"
    unit.release()


def test_empty_body_returns_none(synthesizer: CallableSynthesizer) -> None:
    """Test a unit without statements does nothing."""
    with synthesizer.synthesize() as unit:
        assert unit() is None


def test_primitives_are_globals() -> None:
    """Test synthesized units see the primitives namespace."""
    synthesizer = CallableSynthesizer(primitives={"triple": lambda v: v * 3})
    with synthesizer.synthesize("return triple(x)", params=["x"]) as unit:
        assert unit(2) == 6


def test_global_rebinding_stays_in_its_unit(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test a unit rebinding a global does not change later units."""
    with synthesizer.synthesize("global np", "np = None", "return 1") as unit:
        assert unit() == 1
    assert map("np.abs(val)", [-1], synthesizer=synthesizer) == [1]
    assert synthesizer.primitives["np"] is np


def test_caller_primitives_are_not_modified() -> None:
    """Test synthesis leaves the caller's namespace dict untouched."""
    primitives = {"x": 1}
    synthesizer = CallableSynthesizer(primitives=primitives)
    with synthesizer.synthesize("return x + 1") as unit:
        assert unit() == 2
    assert primitives == {"x": 1}


def test_default_primitives_include_numpy_and_cmp(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test the default namespace exposes np and cmp."""
    with synthesizer.synthesize(
        "return int(np.sum(xs)) + cmp(2, 1)", params=["xs"]
    ) as unit:
        assert unit([1, 2, 3]) == 7


def test_expression_callable_passes_native_callables(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test native callables are used as they are."""

    def double(x: int) -> int:
        return x * 2

    with expression_callable(double, ("x",), synthesizer=synthesizer) as fn:
        assert fn is double
    assert synthesizer.created_count == 0


def test_expression_callable_wraps_string(synthesizer: CallableSynthesizer) -> None:
    """Test strings become the return statement after the preamble."""
    with expression_callable(
        "y + 1", ("x",), preamble=("y = x * 10",), synthesizer=synthesizer
    ) as fn:
        assert fn(2) == 21
        assert synthesizer.live_count == 1
    assert synthesizer.live_count == 0
    assert synthesizer.created_count == 1


def test_expression_callable_rejects_other_types(
    synthesizer: CallableSynthesizer,
) -> None:
    """Test non-string, non-callable expressions are usage errors."""
    with pytest.raises(UsageError):
        with expression_callable(
            42, ("x",), synthesizer=synthesizer  # type: ignore[arg-type]
        ):
            pass
    assert synthesizer.created_count == 0


def test_default_synthesizer_is_created_once() -> None:
    """Test the default synthesizer is lazily created and replaceable."""
    default = get_default_synthesizer()
    assert get_default_synthesizer() is default
    replacement = CallableSynthesizer()
    set_default_synthesizer(replacement)
    assert get_default_synthesizer() is replacement
