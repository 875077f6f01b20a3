"""CLI for StrongPass: score a password, show or change saved settings."""

import argparse
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .checker import StrengthChecker
from .config import ConfigurationError, StrengthConfig, config_path, load_config, save_config

logger = logging.getLogger(__name__)

EXIT_STRONG = 0
EXIT_WEAK = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _overrides(args) -> dict:
    """Options given on the command line; None means not given."""
    out = {
        "min_entropy": args.min_entropy,
        "min_word_length": args.min_word_length,
        "every_dictionary_word": args.every_dictionary_word,
        "use_dictionary": args.use_dictionary,
    }
    return {k: v for k, v in out.items() if v is not None}


def _saved_config(args) -> StrengthConfig:
    return StrengthConfig.from_mapping(load_config(args.config))


def cmd_score(args) -> int:
    cfg = _saved_config(args)
    overrides = _overrides(args)
    if args.extra_word:
        overrides["extra_dictionary_words"] = list(cfg.extra_dictionary_words) + args.extra_word
    checker = StrengthChecker(cfg.replace(**overrides))

    pw = args.password
    entropy = checker.calculate_entropy(pw)
    strong = checker.is_strong(pw)
    matches = ()
    if checker.config.use_dictionary:
        matches = checker.adjuster.assess(pw).matches

    header = "[bold green]Strong[/bold green]" if strong else "[bold red]Weak[/bold red]"
    body = (
        f"Adjusted entropy: {entropy:g} bits\n"
        f"Minimum entropy: {checker.min_entropy:g} bits\n"
        f"Dictionary check: {'on' if checker.config.use_dictionary else 'off'}"
    )
    print(Panel(body, title=header))
    if matches:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Dictionary word")
        table.add_column("Position", justify="right")
        for m in matches:
            table.add_row(m.word, str(m.start + 1))
        print(table)
    return EXIT_STRONG if strong else EXIT_WEAK


def cmd_config_show(args) -> int:
    cfg = _saved_config(args)
    table = Table(show_header=True, header_style="bold cyan", title=args.config or config_path())
    table.add_column("Option")
    table.add_column("Value")
    for key, value in cfg.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        table.add_row(key, str(value))
    print(table)
    return 0


def cmd_config_set(args) -> int:
    overrides = _overrides(args)
    if args.extra_word is not None:
        overrides["extra_dictionary_words"] = args.extra_word
    # validate before writing anything
    cfg = _saved_config(args).replace(**overrides)
    path = save_config(cfg.to_dict(), args.config)
    print(f"[green]Saved settings to:[/green] {path}")
    return 0


def _add_option_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--min-entropy", type=float, help="Minimum entropy (bits) for a strong password")
    p.add_argument("--min-word-length", type=int, help="Shortest substring treated as a dictionary word")
    p.add_argument("--first-word-only", dest="every_dictionary_word", action="store_false", default=None,
                   help="Only penalize the first dictionary word found")
    p.add_argument("--every-word", dest="every_dictionary_word", action="store_true", default=None,
                   help="Penalize every dictionary word found")
    p.add_argument("--no-dictionary", dest="use_dictionary", action="store_false", default=None,
                   help="Skip the dictionary check")
    p.add_argument("--dictionary", dest="use_dictionary", action="store_true", default=None,
                   help="Use the dictionary check")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strongpass")
    parser.add_argument("--config", "-c", type=str, help="Path to settings file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose (debug) logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sc = sub.add_parser("score", help="Score a password against the dictionary and threshold")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    _add_option_flags(sc)
    sc.add_argument("--extra-word", "-w", action="append", help="Extra dictionary word (repeatable)")
    sc.set_defaults(func=cmd_score)

    c = sub.add_parser("config", help="Saved settings")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show saved settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change saved settings")
    _add_option_flags(c_set)
    c_set.add_argument("--extra-word", "-w", action="append",
                       help="Extra dictionary word (repeatable; replaces the saved list)")
    c_set.set_defaults(func=cmd_config_set)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except ConfigurationError as e:
        logger.debug("configuration rejected", exc_info=True)
        print(f"[red]Invalid settings: {escape(str(e))}[/red]")
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
