#!/usr/bin/env python3
"""
l10n-repair CLI - Repair German localization defects in HTML

Usage:
    l10n-repair fix <page.html> [-o repaired.html] [--dictionary extra.yaml] [--report counters.json]
    l10n-repair classify <text>... [--json]
    l10n-repair dictionary [--dictionary extra.yaml]
"""

import sys
import argparse
import json
from dataclasses import replace
from pathlib import Path

from .classifiers import classify, default_classifiers
from .config import ConfigError, config
from .diagnostics import enable_diagnostics, get_logger
from .dictionary import build_dictionary
from .html_io import parse_html, to_html
from .service import RepairService

logger = get_logger(__name__)


def _configure_diagnostics(args):
    if args.verbose:
        enable_diagnostics("DEBUG")
    elif args.quiet:
        enable_diagnostics("ERROR")
    else:
        enable_diagnostics("INFO")


def _effective_config(args):
    if getattr(args, 'dictionary', None):
        return replace(config, dictionary_path=Path(args.dictionary))
    return config


def cmd_fix(args):
    """Repair an HTML file"""
    _configure_diagnostics(args)
    try:
        cfg = _effective_config(args)
        markup = Path(args.input).read_text(encoding='utf-8')
        document = parse_html(markup)
        service = RepairService(document, cfg)
        service.start()
        batches = service.run_until_idle()
        service.stop()
    except (OSError, ConfigError) as e:
        logger.error(f"Repair failed: {e}")
        return 1

    totals = service.totals
    logger.info(
        f"Repaired {args.input}: {totals.text.rewritten} text and "
        f"{totals.currency.rewritten} currency rewrites in {batches} follow-up batches"
    )

    if args.report:
        summary = dict(totals.to_dict(), batches=batches)
        Path(args.report).write_text(json.dumps(summary, indent=2), encoding='utf-8')
        logger.info(f"Report written to: {args.report}")

    result = to_html(document)
    if args.output:
        Path(args.output).write_text(result, encoding='utf-8')
        logger.info(f"Result written to: {args.output}")
    else:
        print(result)
    return 0


def cmd_classify(args):
    """Show how single text snippets would be rewritten"""
    _configure_diagnostics(args)
    try:
        cfg = _effective_config(args)
        dictionary = build_dictionary(cfg.dictionary_path)
    except ConfigError as e:
        logger.error(e)
        return 1

    classifiers = default_classifiers(dictionary, cfg.locale, cfg.duration_marker)
    rows = []
    for text in args.text:
        result = classify(text, classifiers)
        rows.append({
            "text": text,
            "kind": result.kind if result else None,
            "rewritten": result.apply(text) if result else text,
        })

    if args.json:
        print(json.dumps(rows, indent=2, ensure_ascii=False))
    else:
        for row in rows:
            print(f"{row['kind'] or '-':<12} {row['text']!r} -> {row['rewritten']!r}")
    return 0


def cmd_dictionary(args):
    """List the effective translation table"""
    _configure_diagnostics(args)
    try:
        dictionary = build_dictionary(_effective_config(args).dictionary_path)
    except ConfigError as e:
        logger.error(e)
        return 1

    for entry in dictionary:
        print(f"{entry.source!r} -> {entry.target!r}")
    print(f"Total: {len(dictionary)} entries")
    return 0


def _add_common(parser):
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Quiet mode')


DICTIONARY_ARG_HELP = "YAML file with extra 'source: target' translations"


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="l10n-repair - Fix German dates, amounts and labels in rendered HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    fix_parser = subparsers.add_parser('fix', help='Repair an HTML file')
    fix_parser.add_argument('input', help='HTML file to repair')
    fix_parser.add_argument('--output', '-o', help='Write repaired HTML here instead of stdout')
    fix_parser.add_argument('--dictionary', '-d', help=DICTIONARY_ARG_HELP)
    fix_parser.add_argument('--report', help='Write repair counters as JSON here')
    _add_common(fix_parser)
    fix_parser.set_defaults(func=cmd_fix)

    classify_parser = subparsers.add_parser('classify', help='Classify text snippets')
    classify_parser.add_argument('text', nargs='+', help='Text to classify')
    classify_parser.add_argument('--json', action='store_true', help='JSON output')
    classify_parser.add_argument('--dictionary', '-d', help=DICTIONARY_ARG_HELP)
    _add_common(classify_parser)
    classify_parser.set_defaults(func=cmd_classify)

    dictionary_parser = subparsers.add_parser('dictionary', help='List translations, longest first')
    dictionary_parser.add_argument('--dictionary', '-d', help=DICTIONARY_ARG_HELP)
    _add_common(dictionary_parser)
    dictionary_parser.set_defaults(func=cmd_dictionary)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
