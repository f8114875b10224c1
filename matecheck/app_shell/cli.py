import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from matecheck.adapters.console import ConsoleOutput
from matecheck.components.levels import run_levels
from matecheck.components.moves import write_lines
from matecheck.ports.output import OutputPort
from matecheck.rules import Rules, RulesError, load_rules

logger = logging.getLogger("cli")

BANNER = (
    "",
    "====================================",
    "   DESAFIO DE XADREZ - MATECHECK   ",
    "====================================",
)


def get_rules(path: Path | None = None) -> Rules:
    try:
        return load_rules(path)
    except (FileNotFoundError, RulesError) as e:
        logger.error(f"Could not load rules: {e}")
        sys.exit(1)


def run_program(rules: Rules, out: OutputPort) -> None:
    """Banner, the three levels, closing separator."""
    write_lines(BANNER, out)
    run_levels(rules.moves, out)


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(level=logging.WARNING)

    parser = argparse.ArgumentParser(
        prog="matecheck",
        description="Chess piece movement drills with loops, nested loops and recursion",
    )
    parser.parse_args(argv)

    rules = get_rules()
    run_program(rules, ConsoleOutput())


if __name__ == "__main__":
    main()
