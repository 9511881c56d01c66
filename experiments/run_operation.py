"""Script for running one functional operation with hydra.

Example:
    python experiments/run_operation.py operation=filter \
        'expression="val > 0"' "containers=[[-1,2,-3,4]]"
"""

import logging

import hydra
from omegaconf import DictConfig

from functional_expressions.runner import run_operation


@hydra.main(version_base=None, config_name="config", config_path="conf/")
def _main(cfg: DictConfig) -> None:
    logging.info(
        f"Running operation={cfg.operation}, expression={cfg.get('expression')}"
    )
    run_operation(cfg)


if __name__ == "__main__":
    _main()  # pylint: disable=no-value-for-parameter
