from __future__ import annotations

"""Command-line front-end for hangul_text.

Examples:
    python main.py split "hi 이 there"
    python main.py decompose --compat 안녕
    python main.py score 김민지 김믽
    python main.py best 안녕 안녕하세요 안녕
    python main.py --format yaml classify 는
"""

import argparse
import logging
import os
import sys
from typing import Any, Sequence

import yaml

from hangul_text import (
    calculate_best_answer,
    calculate_correct_jamos,
    calculate_correct_keystrokes,
    classify,
    compose_syllable,
    decompose_all,
    split,
    to_compat_text,
    to_keystrokes,
)
from hangul_text.services.settings_store import OUTPUT_FORMATS, SCORE_MODES, CliSettings, SettingsStore

logger = logging.getLogger("hangul_text.cli")

SETTINGS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.yaml")


# -------------------------------------------------
#           HELPERS
# -------------------------------------------------

def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _emit(fmt: str, lines: list[str], data: Any) -> None:
    if fmt == "yaml":
        sys.stdout.write(yaml.safe_dump(data, allow_unicode=True, sort_keys=False))
        return
    for line in lines:
        print(line)


# -------------------------------------------------
#           COMMANDS
# -------------------------------------------------

def _cmd_classify(args: argparse.Namespace, settings: CliSettings) -> int:
    rows = [(ch, classify(ch)) for ch in args.text]
    _emit(
        args.format,
        ["U+{:04X}\t{}\t{}".format(ord(ch), ch, cls) for ch, cls in rows],
        [{"char": ch, "codepoint": "U+{:04X}".format(ord(ch)), "class": str(cls)} for ch, cls in rows],
    )
    return 0


def _cmd_split(args: argparse.Namespace, settings: CliSettings) -> int:
    runs = split(args.text)
    _emit(
        args.format,
        ["{}\t{}".format(cls, text) for cls, text in runs],
        [{"class": str(cls), "text": text} for cls, text in runs],
    )
    return 0


def _cmd_decompose(args: argparse.Namespace, settings: CliSettings) -> int:
    compat = settings.compat if args.compat is None else args.compat
    result = decompose_all(args.text)
    if compat:
        result = to_compat_text(result)
    _emit(args.format, [result], {"input": args.text, "output": result, "compat": compat})
    return 0


def _cmd_compose(args: argparse.Namespace, settings: CliSettings) -> int:
    syllable = compose_syllable(args.lead, args.vowel, args.trail)
    _emit(args.format, [syllable], {"syllable": syllable})
    return 0


def _cmd_compat(args: argparse.Namespace, settings: CliSettings) -> int:
    result = to_compat_text(args.text)
    _emit(args.format, [result], {"input": args.text, "output": result})
    return 0


def _cmd_keystrokes(args: argparse.Namespace, settings: CliSettings) -> int:
    keys = to_keystrokes(args.text)
    _emit(args.format, [" ".join(keys)], {"input": args.text, "keystrokes": keys})
    return 0


def _cmd_score(args: argparse.Namespace, settings: CliSettings) -> int:
    mode = args.mode or settings.score_mode
    if mode == "jamos":
        result = calculate_correct_jamos(args.expected, args.actual)
    else:
        result = calculate_correct_keystrokes(args.expected, args.actual)
    logger.debug("score mode=%s expected=%r actual=%r -> %s", mode, args.expected, args.actual, result)
    _emit(
        args.format,
        ["{}/{}".format(result.correct, result.total)],
        {"mode": mode, "correct": result.correct, "total": result.total},
    )
    return 0


def _cmd_best(args: argparse.Namespace, settings: CliSettings) -> int:
    best = calculate_best_answer(args.answers, args.actual)
    line = "{}\t{}/{}".format(best.answer, best.correct, best.total)
    if best.is_completely_correct:
        line += "\tcorrect"
    _emit(
        args.format,
        [line],
        {
            "answer": best.answer,
            "correct": best.correct,
            "total": best.total,
            "completely_correct": best.is_completely_correct,
        },
    )
    return 0


def _cmd_config(args: argparse.Namespace, settings: CliSettings) -> int:
    store = SettingsStore(args.settings)
    if args.key is not None:
        if args.value is None:
            raise ValueError("config {} needs a value".format(args.key))
        value = yaml.safe_load(args.value)
        store.set_value(args.key, value)
        logger.info("Saved %s=%r to %s", args.key, value, store.path)
        settings = store.get_cli_settings()
    data = {
        "format": settings.format,
        "compat": settings.compat,
        "score_mode": settings.score_mode,
        "log_level": settings.log_level,
    }
    _emit(args.format, ["{}: {}".format(k, v) for k, v in data.items()], data)
    return 0


# -------------------------------------------------
#           PARSER
# -------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangul-text",
        description="Classify, split and decompose Hangul text.",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format (default from settings).")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("classify", help="Show the Hangul block of each character.")
    p.add_argument("text")
    p.set_defaults(func=_cmd_classify)

    p = sub.add_parser("split", help="Split text into runs of same-class characters.")
    p.add_argument("text")
    p.set_defaults(func=_cmd_split)

    p = sub.add_parser("decompose", help="Decompose Hangul syllables into jamo.")
    p.add_argument("text")
    p.add_argument("--compat", dest="compat", action="store_true", default=None,
                   help="Map jamo to compatibility jamo for display.")
    p.add_argument("--no-compat", dest="compat", action="store_false")
    p.set_defaults(func=_cmd_decompose)

    p = sub.add_parser("compose", help="Compose a syllable from jamo.")
    p.add_argument("lead")
    p.add_argument("vowel")
    p.add_argument("trail", nargs="?", default=None)
    p.set_defaults(func=_cmd_compose)

    p = sub.add_parser("compat", help="Map positional jamo to compatibility jamo.")
    p.add_argument("text")
    p.set_defaults(func=_cmd_compat)

    p = sub.add_parser("keystrokes", help="List 2-set keyboard keystrokes for text.")
    p.add_argument("text")
    p.set_defaults(func=_cmd_keystrokes)

    p = sub.add_parser("score", help="Score a typed answer against the expected text.")
    p.add_argument("expected")
    p.add_argument("actual")
    p.add_argument("--mode", choices=SCORE_MODES, default=None)
    p.set_defaults(func=_cmd_score)

    p = sub.add_parser("best", help="Find the accepted answer closest to a typed answer.")
    p.add_argument("actual")
    p.add_argument("answers", nargs="+")
    p.set_defaults(func=_cmd_best)

    p = sub.add_parser("config", help="Show or change saved settings.")
    p.add_argument("key", nargs="?", default=None)
    p.add_argument("value", nargs="?", default=None)
    p.set_defaults(func=_cmd_config)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.settings is None:
        args.settings = SETTINGS_PATH
    # Default level until settings are read, so load warnings are formatted
    _configure_logging("DEBUG" if args.verbose else "WARNING")
    settings = SettingsStore(args.settings).get_cli_settings()
    _configure_logging("DEBUG" if args.verbose else settings.log_level)
    if args.format is None:
        args.format = settings.format

    try:
        return args.func(args, settings)
    except ValueError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print("error: {}".format(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
