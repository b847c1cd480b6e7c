"""CLI entry point — profile resume generation and stats."""

import argparse
import json
import logging
import sys
from pathlib import Path

from job_board.config import AppConfig, load_config, validate_config
from job_board.models import make_session_factory
from job_board.profile.records import DictRecord
from job_board.resume.builder import build_markdown
from job_board.resume.pdf_renderer import create_renderer, render_pdf
from job_board.resume.redactor import redact_markdown
from job_board.storage.profile_store import ProfileNotFoundError, ProfileStore
from job_board.utils.logging_config import resolve_level, setup_logging

logger = logging.getLogger("job_board")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Job Board - candidate resume generation",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml; built-in defaults if missing)",
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument(
        "--stats", action="store_true",
        help="Print profile statistics and exit",
    )
    action.add_argument(
        "--regenerate", type=int, metavar="PROFILE_ID",
        help="Force resume regeneration for one profile",
    )
    action.add_argument(
        "--render", metavar="PROFILE_JSON",
        help="Render a profile JSON file to Markdown without touching the database",
    )
    parser.add_argument(
        "--redacted", action="store_true",
        help="With --render, print the redacted Markdown",
    )
    parser.add_argument(
        "--pdf-out", metavar="PATH",
        help="With --render, also write the PDF to PATH",
    )
    args = parser.parse_args(argv)
    if not args.render and (args.redacted or args.pdf_out):
        parser.error("--redacted and --pdf-out require --render")
    return args


def print_stats(store: ProfileStore):
    """Print profile statistics."""
    stats = store.get_stats()
    print("\n=== Job Board Statistics ===")
    print(f"Total profiles: {stats['total_profiles']}")
    print(f"With generated resume: {stats['with_resume']}")
    print(f"With PDF resume: {stats['with_pdf']}")
    print(f"Open to work: {stats['open_to_work']}")
    print()


def render_file(config: AppConfig, profile_path: str, redacted: bool = False, pdf_out: str = "") -> int:
    """Print the Markdown for a profile JSON file. Returns an exit code."""
    renderer = None
    if pdf_out:
        renderer = create_renderer(config.resume.pdf)
        if renderer is None:
            print("Error: PDF output is disabled (resume.pdf.enabled is false)", file=sys.stderr)
            return 1

    try:
        with open(profile_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Error: profile file not found: {profile_path}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: {profile_path} is not valid JSON: {e}", file=sys.stderr)
        return 1
    if not isinstance(data, dict):
        print(f"Error: {profile_path} must contain a JSON object", file=sys.stderr)
        return 1

    record = DictRecord(data)
    markdown = build_markdown(record)
    if not markdown:
        print("Profile has no resume content", file=sys.stderr)
        return 1

    print(redact_markdown(markdown, record, config.resume.placeholder) if redacted else markdown)

    if renderer is not None:
        result = render_pdf(renderer, markdown)
        if not result.ok:
            print(f"PDF rendering failed: {result.error}", file=sys.stderr)
            return 1
        Path(pdf_out).write_bytes(result.data)
        logger.info("Wrote PDF to %s (%d bytes)", pdf_out, len(result.data))

    return 0


def main(argv=None):
    args = parse_args(argv)

    # Load config
    try:
        config = load_config(args.config)
    except FileNotFoundError:
        config = AppConfig()

    # Setup logging; an unknown level is reported by validate_config below
    try:
        level = resolve_level(config.log_level)
    except ValueError:
        level = logging.INFO
    setup_logging(config.log_dir, level, sql_echo=config.database.echo)

    # Validate config and print warnings
    for w in validate_config(config):
        logger.warning("Config: %s", w)

    if args.render:
        sys.exit(render_file(config, args.render, redacted=args.redacted, pdf_out=args.pdf_out))

    # SQL echo goes through the handlers installed by setup_logging
    session_factory = make_session_factory(config.database.url)
    with ProfileStore(
        session_factory,
        renderer=create_renderer(config.resume.pdf),
        placeholder=config.resume.placeholder,
    ) as store:
        if args.stats:
            print_stats(store)
            return

        try:
            written = store.regenerate_resume(args.regenerate)
        except ProfileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if written:
            print(f"Resume regenerated for profile {args.regenerate}")
        else:
            print(f"Profile {args.regenerate} has no resume content", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
