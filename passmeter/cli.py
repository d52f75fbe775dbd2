"""PassMeter command-line interface.

Usage examples:
    python -m passmeter check mypassword
    python -m passmeter check -f passwords.txt --patterns bad.txt
    python -m passmeter check --min-length 12 --uniqueness 0.5 S3cret!pass
    python -m passmeter patterns
"""

import argparse
import logging
import sys

from passmeter import (
    DEFAULT_BAD_PATTERNS,
    ClassifierConfig,
    PasswordClassifier,
    load_bad_patterns,
    meter_message,
)

logger = logging.getLogger(__name__)

MESSAGES = [
    "Strong",
    "Medium",
    "Weak: repeated characters",
    "Weak: sequential characters",
    "Weak: well-known password",
    "Weak: too short",
    "Weak: too few unique characters",
]

_BARS = {"strong": "###", "medium": "##-", "weak": "#--"}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passmeter",
        description="Classify password strength locally.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Classify passwords")
    check_p.add_argument("passwords", nargs="*", help="Passwords to classify")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )
    _add_common_args(check_p)
    check_p.add_argument(
        "--min-length", type=int, default=8,
        help="Minimum password length (default: 8)",
    )
    check_p.add_argument(
        "--same-run", type=int, default=3,
        help="Repeated-character run that makes a password weak (default: 3)",
    )
    check_p.add_argument(
        "--increasing-run", type=int, default=3,
        help="Ascending run that makes a password weak (default: 3)",
    )
    check_p.add_argument(
        "--decreasing-run", type=int, default=3,
        help="Descending run that makes a password weak (default: 3)",
    )
    check_p.add_argument(
        "--uniqueness", type=float, default=0.3,
        help="Max ratio of distinct characters still considered weak (default: 0.3)",
    )
    check_p.add_argument(
        "--well-known", type=float, default=0.4,
        help="Max share left after removing a bad pattern still considered weak "
             "(default: 0.4)",
    )

    # ── patterns ───────────────────────────────────────────────────────
    patterns_p = sub.add_parser("patterns", help="List the active bad patterns")
    _add_common_args(patterns_p)

    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("passmeter").setLevel(
        logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
    )

    if args.command == "check":
        try:
            config = _build_config(args)
        except ValueError as exc:
            parser.error(str(exc))
        return _cmd_check(args, config)
    if args.command == "patterns":
        return _cmd_patterns(args)

    parser.print_help()
    return 0


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-p", "--patterns",
        help="Read bad patterns from a file instead of the built-in list",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _patterns(args: argparse.Namespace) -> tuple:
    if args.patterns:
        return load_bad_patterns(args.patterns)
    return DEFAULT_BAD_PATTERNS


def _build_config(args: argparse.Namespace) -> ClassifierConfig:
    config = ClassifierConfig(
        min_length=args.min_length,
        same_run_threshold=args.same_run,
        increasing_run_threshold=args.increasing_run,
        decreasing_run_threshold=args.decreasing_run,
        uniqueness_ratio_threshold=args.uniqueness,
        well_known_remainder_ratio_threshold=args.well_known,
        bad_patterns=_patterns(args),
    )
    logger.debug(
        "Classifier config: min_length=%d runs=%d/%d/%d uniqueness=%.2f "
        "well_known=%.2f patterns=%d",
        config.min_length,
        config.same_run_threshold,
        config.increasing_run_threshold,
        config.decreasing_run_threshold,
        config.uniqueness_ratio_threshold,
        config.well_known_remainder_ratio_threshold,
        len(config.bad_patterns),
    )
    return config


def _cmd_check(args: argparse.Namespace, config: ClassifierConfig) -> int:
    passwords = list(args.passwords)

    if args.file:
        with open(args.file) as f:
            passwords.extend(line.strip() for line in f if line.strip())

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    classifier = PasswordClassifier(config)
    rejected = False
    for pwd in passwords:
        verdict = classifier.classify(pwd)
        if not verdict.accepted:
            rejected = True
        bar = _BARS[verdict.bucket]
        print(f"  [{bar}] {verdict.name:<30} '{pwd}' -- {meter_message(verdict, MESSAGES)}")

    return 1 if rejected else 0


def _cmd_patterns(args: argparse.Namespace) -> int:
    for pattern in _patterns(args):
        print(pattern)
    return 0


if __name__ == "__main__":
    sys.exit(main())
