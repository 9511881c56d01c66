"""Configuration of the default synthesizer."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict

from omegaconf import DictConfig, OmegaConf

from functional_expressions.synthesis.primitives import (
    DEFAULT_MODULES,
    create_primitives,
)
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    set_default_synthesizer,
)


@dataclass
class SynthesisConfig:
    """Settings for synthesized callables.

    Attributes:
        name_prefix: Prefix of every synthesized unit name.
        primitives: Alias to module path of the modules visible to
            expressions.
    """

    name_prefix: str = "_lambda_"
    primitives: Dict[str, str] = field(default_factory=DEFAULT_MODULES.copy)


def load_config(overrides: Any = None) -> DictConfig:
    """Merge ``overrides`` (a dict or DictConfig) over the defaults.

    Unknown keys are rejected by the structured schema.
    """
    cfg = OmegaConf.structured(SynthesisConfig)
    if overrides is not None:
        cfg = OmegaConf.merge(cfg, overrides)
    if not isinstance(cfg, DictConfig):
        raise TypeError("cfg must be a DictConfig")
    return cfg


def build_synthesizer(cfg: Any = None) -> CallableSynthesizer:
    """Create a synthesizer from a config (see :func:`load_config`)."""
    cfg = load_config(cfg)
    modules = OmegaConf.to_container(cfg.primitives)
    assert isinstance(modules, dict)
    return CallableSynthesizer(
        primitives=create_primitives(modules),
        name_prefix=cfg.name_prefix,
    )


def configure(cfg: Any = None) -> CallableSynthesizer:
    """Install a synthesizer built from ``cfg`` as the process default."""
    synthesizer = build_synthesizer(cfg)
    set_default_synthesizer(synthesizer)
    logging.info(
        f"Default synthesizer configured with prefix={synthesizer.name_prefix}"
    )
    return synthesizer
