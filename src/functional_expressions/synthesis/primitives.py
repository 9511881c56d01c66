"""Names visible to synthesized callables."""

import importlib
from typing import Any, Mapping

from functional_expressions.structs import NO_VALUE

DEFAULT_MODULES: dict[str, str] = {
    "np": "numpy",
    "math": "math",
    "copy": "copy",
}


def cmp(left: Any, right: Any) -> int:
    """Three-way comparison: -1, 0 or 1."""
    return (left > right) - (left < right)


def load_modules(modules: Mapping[str, str]) -> dict[str, Any]:
    """Import modules and return them keyed by alias.

    Args:
        modules: Mapping of alias (e.g. 'np') to module path (e.g. 'numpy')

    Returns:
        Dictionary mapping aliases to imported modules

    Raises:
        ImportError: If a module cannot be imported
    """
    loaded: dict[str, Any] = {}
    for alias, module_path in modules.items():
        try:
            loaded[alias] = importlib.import_module(module_path)
        except ImportError as e:
            raise ImportError(
                f"Could not import module '{module_path}' for alias '{alias}': {e}"
            ) from e
    return loaded


def create_primitives(
    modules: Mapping[str, str] | None = None,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the globals namespace for synthesized callables.

    Builtins are added by ``exec`` itself, so only modules, helper
    functions and ``extra`` names (which win on conflict) are listed here.
    """
    primitives: dict[str, Any] = {"cmp": cmp, "NO_VALUE": NO_VALUE}
    primitives.update(load_modules(DEFAULT_MODULES if modules is None else modules))
    if extra:
        primitives.update(extra)
    return primitives
