#!/usr/bin/env python3
"""
Fold an RNA sequence around its major loop from the command line.

The sequence is written with one letter per free nucleotide and braces around
runs already committed to a loop. The longest loop is kept fixed and the
bases on either side are paired to minimise a simple free-energy proxy.

Examples:
  - python predict_rna.py "AAAA{CCCC}UUUU"
  - python predict_rna.py --json "GGAC{GAAA}GUCC"
  - python predict_rna.py -vv --sequential --yaml /path/to/energies.yaml "ac{gg}gu"

"""

# --- Standard Library Imports ---
from __future__ import annotations
import argparse
import json
import sys
import logging
from typing import Optional

# --- Third-Party Imports ---
import yaml

# --- Local Application Imports ---
from rna_loop_fold.utils.logging_utils import setup_logger, DEFAULT_LOG_DIR
from rna_loop_fold.errors import ParseError, PreconditionViolation
from rna_loop_fold.energies import ArmPairEnergyModel, FreeEnergyLoader
from rna_loop_fold.folding import ArmSearchConfig, FoldResult, minimize_free_energy
from rna_loop_fold.parsing import parse_sequence

# Set up module logger
logger = logging.getLogger(__name__)


# --------------------------
# Logging Configuration
# --------------------------
def setup_cli_logging(verbose_level: int, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the CLI and the modules it drives.

    Parameters
    ----------
    verbose_level : int
        -1 for ERROR (quiet), 0 for WARNING, 1 for INFO, 2 or more for DEBUG.
    log_file : Optional[str]
        Explicit log file. When omitted and `verbose_level` > 0, a timestamped
        file is written under `var/log/`.
    """
    level_map = {
        -1: logging.ERROR,
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    log_level = level_map.get(min(verbose_level, 2), logging.INFO)

    should_log_to_file = (verbose_level > 0) or (log_file is not None)

    loggers_to_configure = [
        __name__,
        "rna_loop_fold.parsing.sequence_parser",
        "rna_loop_fold.folding.arm_search",
        "rna_loop_fold.energies.energy_loader",
    ]

    for logger_name in loggers_to_configure:
        setup_logger(
            logger_name,
            level=log_level,
            log_file=log_file,
            enable_file_logging=should_log_to_file,
        )

    if should_log_to_file and log_file is None:
        logger.info(f"Logs will be saved to: {DEFAULT_LOG_DIR.resolve()}")


# --------------------------
# Helpers
# --------------------------
def build_energy_model(yaml_path: Optional[str]) -> ArmPairEnergyModel:
    """
    Load energy coefficients and wrap them in an energy model.

    Parameters
    ----------
    yaml_path : Optional[str]
        Coefficient file. None loads the bundled unit coefficients.

    Returns
    -------
    ArmPairEnergyModel
        The energy model used by the search.
    """
    params = FreeEnergyLoader().load(yaml_path)
    logger.info(
        f"Energy coefficients: single={params.single_penalty}, "
        f"loop/base={params.loop_base_penalty}, bond={params.bond_bonus}"
    )
    return ArmPairEnergyModel(params=params)


def format_report(result: FoldResult) -> str:
    """Two-line human-readable report of the input and optimized structures."""
    return (
        f"input -> {result.input_structure!r} (H = {result.initial_energy})\n"
        f"optimized <- {result.structure!r} (H = {result.optimized_energy})"
    )


def format_json(result: FoldResult) -> str:
    return json.dumps({
        "input": result.input_structure.to_notation(),
        "initial_energy": result.initial_energy,
        "optimized": result.structure.to_notation(),
        "optimized_energy": result.optimized_energy,
        "length": result.input_structure.base_count,
    }, indent=2)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


# --------------------------
# Command-Line Interface
# --------------------------
def main(argv=None) -> int:
    """
    Parse command-line arguments, fold the sequence and print the reports.
    """
    parser = argparse.ArgumentParser(description="Fold an RNA sequence around its major loop.")
    parser.add_argument("sequence", help="RNA sequence, e.g. AAAA{CCCC}UUUU (a/c/g/u, loops in braces)")
    parser.add_argument("--json", action="store_true",
                        help="Emit JSON instead of human-readable text.")
    parser.add_argument("--lenient", action="store_true",
                        help="Truncate loop bodies at the first invalid character instead of failing.")
    parser.add_argument("--yaml", default=None,
                        help="Path to energy coefficient YAML (defaults to package data).")

    # Search arguments
    parser.add_argument("--workers", type=positive_int, default=None,
                        help="Thread pool size for the branch search (default: executor default).")
    parser.add_argument("--sequential", action="store_true",
                        help="Evaluate search branches on a single thread.")

    # Logging arguments
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v=INFO, -vv=DEBUG)")
    parser.add_argument("--log-file", default=None,
                        help="Path to log file (default: var/log/<logger>_TIMESTAMP.log if verbose)")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress all output except final result")

    cli_args = parser.parse_args(argv)

    verbose_level = -1 if cli_args.quiet else cli_args.verbose
    setup_cli_logging(verbose_level, cli_args.log_file)

    try:
        structure = parse_sequence(cli_args.sequence, strict=not cli_args.lenient)
    except ParseError as e:
        logger.error(f"Sequence parsing failed: {e}")
        print(f"Error: failed to parse RNA sequence: {e}", file=sys.stderr)
        return 2

    try:
        energy_model = build_energy_model(cli_args.yaml)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load energy coefficients: {e}", exc_info=True)
        print(f"Failed to load energy coefficient YAML: {e}", file=sys.stderr)
        return 2

    config = ArmSearchConfig(parallel=not cli_args.sequential, max_workers=cli_args.workers)

    try:
        result = minimize_free_energy(structure, energy_model=energy_model, config=config)
    except PreconditionViolation as e:
        logger.error(f"Folding failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if cli_args.json:
        print(format_json(result))
    else:
        print()
        print(format_report(result))
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
