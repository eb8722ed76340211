"""Punch payroll command line interface.

Computes payroll summaries from a punch dataset and prints them as JSON.

Usage:
    python -m punch_payroll
    python -m punch_payroll --input punches.jsonc
    python -m punch_payroll --log-level DEBUG --allow-negative-durations

Any failure (missing dataset, parse error, unknown job) propagates and
terminates the process with a non-zero status.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TextIO

from punch_payroll.calculators.engine import PayrollEngine
from punch_payroll.calculators.summary_builder import SummaryBuilder
from punch_payroll.config import LOG_LEVELS, Settings, get_settings
from punch_payroll.loader import load_payroll


class PayrollCli:
    """Punch payroll command line interface."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="punch-payroll",
            description="Compute wages and benefits from time punches",
        )
        parser.add_argument(
            "--input",
            dest="input_path",
            default=self.settings.input_path,
            help="Punch dataset to read (default: packaged PunchLogicTest.jsonc)",
        )
        parser.add_argument(
            "--log-level",
            default=self.settings.log_level,
            choices=LOG_LEVELS,
            type=str.upper,
            help="Logging level for diagnostics on stderr",
        )
        parser.add_argument(
            "--allow-negative-durations",
            action=argparse.BooleanOptionalAction,
            default=self.settings.allow_negative_durations,
            help="Accept punches that end before they start instead of failing",
        )
        return parser

    def run(self, argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
        """Parse arguments, compute payroll and print the results."""
        args = self.parser.parse_args(argv)
        out = stdout or sys.stdout

        logging.basicConfig(
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

        registry, employees = load_payroll(args.input_path)
        engine = PayrollEngine(
            registry,
            allow_negative_durations=args.allow_negative_durations,
        )
        summaries = engine.compute_all(employees)
        results = SummaryBuilder.format_results(summaries)

        print(json.dumps(results, indent=self.settings.output_indent), file=out)
        return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    return PayrollCli().run(argv)


if __name__ == "__main__":
    sys.exit(main())
