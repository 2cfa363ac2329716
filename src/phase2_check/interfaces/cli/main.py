import argparse
import logging
from pathlib import Path
from typing import Optional

import colorlog

from phase2_check import __version__ as _PACKAGE_VERSION
from phase2_check.core.enums import ReportLevel

EXIT_PASS = 0
EXIT_FAIL = 1
EXIT_ERROR = 2


def setup_logging(debug: bool = False, errors_only: bool = False) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def _verbosity_from_args(args: argparse.Namespace) -> int:
    if getattr(args, "quiet", False):
        return int(ReportLevel.SILENT)
    return min(int(getattr(args, "verbose", 0) or 0), int(ReportLevel.EXHAUSTIVE))


def cmd_check(args: argparse.Namespace) -> int:
    """Check one private netCDF file.

    Returns:
        0 if every check passed
        1 if at least one check failed
        2 if the file or the reference data could not be used
    """
    from phase2_check.validation import Reporter, run_validation

    nc_file = args.nc_file
    reporter = Reporter(
        verbosity=_verbosity_from_args(args),
        failures_only=bool(getattr(args, "failures_only", False)),
    )

    try:
        report = run_validation(nc_file, reporter)
    except FileNotFoundError as e:
        logging.error("%s", e)
        return EXIT_ERROR
    except (ValueError, TypeError, LookupError, OSError) as e:
        logging.error("Error checking %s: %s", nc_file, e)
        return EXIT_ERROR

    report_json = getattr(args, "report_json", None)
    if report_json:
        report_path = Path(report_json)
        try:
            report_path.parent.mkdir(parents=True, exist_ok=True)
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(report.to_json())
        except OSError as e:
            logging.error("Failed to write report JSON %s: %s", report_path, e)
            return EXIT_ERROR
        logging.info("JSON report saved: %s", report_path)

    if report.passed:
        return EXIT_PASS
    logging.debug("Failed checks: %s", ", ".join(r.check_id for r in report.get_failed_checks()))
    return EXIT_FAIL


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="check-phase2",
        description=(
            "Verifies that TCCON .private.nc files have been updated to GGG2020 Phase 2 "
            f"(v{_PACKAGE_VERSION})"
        ),
    )
    p.add_argument("nc_file", help="The .private.nc file to check")

    output = p.add_mutually_exclusive_group()
    output.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help=(
            "Increase the level of detail shown on screen. Repeat for more detail: "
            "1 = pass/fail per test category (ADCF, AICF, window-to-window values, windows "
            "included, ...); 2 = per window/gas; 3 = per variable; 4 = as 3, listing every "
            "missing variable instead of the first 10."
        ),
    )
    output.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help=(
            "Suppress all standard output; pass or fail is only indicated by the exit code "
            "(0 = pass, 1 = fail, 2 = error)"
        ),
    )
    p.add_argument(
        "-f",
        "--failures-only",
        action="store_true",
        help="Only print failure messages for higher verbosity messaging.",
    )
    p.add_argument(
        "--report-json",
        default=None,
        help="Write a detailed JSON report of all checks to this path",
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {_PACKAGE_VERSION}")
    p.set_defaults(func=cmd_check)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on bad arguments and 0 for --help/--version
        return int(e.code or 0)
    setup_logging(
        debug=bool(getattr(args, "debug", False)),
        errors_only=bool(getattr(args, "quiet", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
