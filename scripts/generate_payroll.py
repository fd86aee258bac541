"""Generate payroll for one pay period from the command line.

Usage: python scripts/generate_payroll.py 2025-01 [--export payroll.csv]
"""

from __future__ import annotations

import argparse
import importlib
import logging.config
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.payroll_system.payroll_system.common.money import format_php
from src.payroll_system.payroll_system.container import build_container
from src.payroll_system.payroll_system.core.exceptions import DomainError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate monthly payroll records.")
    parser.add_argument("pay_period", help="Pay period in YYYY-MM format")
    parser.add_argument("--export", metavar="PATH", help="Also write the period's CSV export to PATH")
    parser.add_argument("--actor", default="cli", help="Identifier recorded in the logs")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.config.dictConfig(settings.LOGGING_CONFIG)
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        withhold_tax=bool(getattr(settings, "PAYROLL_WITHHOLD_TAX", False)),
    )

    try:
        records = container.payroll_generator.generate(args.pay_period, actor=args.actor)
        summary = container.payroll_report_service.summary(args.pay_period)
        if args.export:
            _, text = container.payroll_report_service.export_csv(args.pay_period)
            Path(args.export).write_text(text, encoding="utf-8")
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(
        f"OK: {len(records)} payroll records for {summary.pay_period} "
        f"(gross {format_php(summary.total_gross_pay)}, net {format_php(summary.total_net_pay)})"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
