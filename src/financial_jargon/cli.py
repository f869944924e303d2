from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

from . import __version__
from .config.loader import Config, load_config
from .converters import (
    MonthForm,
    convert_month,
    exchange_name_from_code,
    month_char_from_date,
    month_from_date,
    month_number_from_date,
    short_month_from_date,
)
from .errors import JargonError
from .utils.logging import get_logger

_FORMS = [f.value for f in MonthForm]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="financial-jargon", description="Futures month code and exchange code conversions"
    )
    sub = p.add_subparsers(dest="cmd", required=False)

    # version
    sub.add_parser("version", help="print version")

    # doctor
    doctor = sub.add_parser("doctor", help="print effective config")
    doctor.add_argument("--config", type=Path, default=None, help="Optional YAML settings file")

    # exchange
    exchange = sub.add_parser("exchange", help="normalize an exchange code, e.g. CBOT -> CME")
    exchange.add_argument("code", help="Exchange code or alias, e.g. CBOT, NYMEX, IPE")
    exchange.add_argument("--config", type=Path, default=None, help="Optional YAML settings file")

    # month
    month = sub.add_parser("month", help="convert a month between representations")
    month.add_argument("value", help="e.g. Z, Dec, December, 12")
    month.add_argument("--from", dest="source", choices=_FORMS, required=True, help="Input form")
    month.add_argument("--to", dest="target", choices=_FORMS, required=True, help="Output form")
    month.add_argument("--config", type=Path, default=None, help="Optional YAML settings file")

    # date
    dt = sub.add_parser("date", help="month representation of a calendar date")
    dt.add_argument("date", type=lambda s: date.fromisoformat(s), help="YYYY-MM-DD")
    dt.add_argument("--to", dest="target", choices=_FORMS, default=MonthForm.NAME.value, help="Output form")
    dt.add_argument("--locale", default=None, help="Locale for month names, e.g. de_DE.UTF-8")
    dt.add_argument("--config", type=Path, default=None, help="Optional YAML settings file")

    return p


def _logger(cfg: Config) -> logging.Logger:
    run_id = datetime.now().strftime("%Y%m%d-%H%M%S")
    return get_logger("financial_jargon.cli", logs_root=cfg.logs_root, run_id=run_id, console_level=logging.WARNING)


def _date_value(d: date, target: MonthForm, locale: str | None) -> str:
    if target is MonthForm.CHAR:
        return month_char_from_date(d)
    if target is MonthForm.SHORT:
        return short_month_from_date(d)
    if target is MonthForm.NUMBER:
        return month_number_from_date(d)
    return month_from_date(d, locale=locale)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd == "version":
        print(__version__)
        return 0

    if args.cmd == "doctor":
        cfg = load_config(args.config)
        log = _logger(cfg)

        print("env ok")
        print(f"config.logs_root = {cfg.logs_root}")
        print(f"config.locale    = {cfg.locale or '(english)'}")

        log.info("doctor_config", extra={"logs_root": str(cfg.logs_root), "locale": cfg.locale})
        return 0

    if args.cmd == "exchange":
        cfg = load_config(args.config)
        log = _logger(cfg)
        try:
            name = exchange_name_from_code(args.code)
        except JargonError as e:
            log.warning("exchange_failed", extra={"code": args.code, "error": str(e)})
            print(e)
            return 1
        log.info("exchange", extra={"code": args.code, "result": name})
        print(name)
        return 0

    if args.cmd == "month":
        cfg = load_config(args.config)
        log = _logger(cfg)
        try:
            out = convert_month(args.value, args.source, args.target)
        except JargonError as e:
            log.warning(
                "month_failed",
                extra={"value": args.value, "source": args.source, "target": args.target, "error": str(e)},
            )
            print(e)
            return 1
        log.info("month", extra={"value": args.value, "source": args.source, "target": args.target, "result": out})
        print(out)
        return 0

    if args.cmd == "date":
        cfg = load_config(args.config)
        log = _logger(cfg)
        locale = args.locale or cfg.locale
        try:
            out = _date_value(args.date, MonthForm(args.target), locale)
        except JargonError as e:
            log.warning("date_failed", extra={"date": args.date.isoformat(), "locale": locale, "error": str(e)})
            print(e)
            return 1
        log.info("date", extra={"date": args.date.isoformat(), "target": args.target, "locale": locale, "result": out})
        print(out)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
