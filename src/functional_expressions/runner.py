"""Running a single operation described by a config."""

import logging
from typing import Any, Callable

from omegaconf import DictConfig, OmegaConf

from functional_expressions.config import build_synthesizer
from functional_expressions.operations import (
    append,
    assoc,
    filter,
    map,
    pop,
    reduce,
    reverse,
    sort,
)
from functional_expressions.synthesis.synthesizer import CallableSynthesizer

OperationFn = Callable[[DictConfig, list[Any], CallableSynthesizer], Any]


def _plain(value: Any) -> Any:
    """Convert OmegaConf containers to plain dicts and lists."""
    if OmegaConf.is_config(value):
        return OmegaConf.to_container(value, resolve=True)
    return value


class OperationRegistry:
    """Registry mapping operation names to config-driven calls."""

    def __init__(self) -> None:
        self._operations: dict[str, OperationFn] = {
            "reduce": lambda cfg, cs, s: reduce(
                cfg.expression, _plain(cfg.get("initial")), cs[0], synthesizer=s
            ),
            "map": lambda cfg, cs, s: map(cfg.expression, *cs, synthesizer=s),
            "filter": lambda cfg, cs, s: filter(cfg.expression, cs[0], synthesizer=s),
            "sort": lambda cfg, cs, s: sort(cfg.expression, cs[0], synthesizer=s),
            "reverse": lambda cfg, cs, s: reverse(cs[0]),
            "append": lambda cfg, cs, s: append(cs[0], _plain(cfg["value"])),
            "assoc": lambda cfg, cs, s: assoc(
                cs[0], cfg["key"], _plain(cfg["value"])
            ),
            "pop": lambda cfg, cs, s: pop(cs[0], cfg["key"]),
        }

    def list_available_operations(self) -> list[str]:
        """Get list of available operations."""
        return list(self._operations)

    def run(self, cfg: DictConfig, synthesizer: CallableSynthesizer) -> Any:
        """Run the operation named by ``cfg.operation``.

        Raises:
            ValueError: If the operation is unknown
        """
        name = cfg.operation
        if name not in self._operations:
            raise ValueError(
                f"Unknown operation '{name}'. "
                f"Available operations: {self.list_available_operations()}"
            )
        containers = _plain(cfg.containers)
        return self._operations[name](cfg, containers, synthesizer)


def run_operation(cfg: DictConfig) -> Any:
    """Run the operation in ``cfg`` with a synthesizer built from
    ``cfg.synthesis``."""
    synthesizer = build_synthesizer(cfg.get("synthesis"))
    logging.info(f"Running {cfg.operation} on {len(cfg.containers)} container(s)")
    result = OperationRegistry().run(cfg, synthesizer)
    logging.info(f"Result: {result}")
    return result
