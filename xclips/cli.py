"""
Command-line interface for xclips
"""
import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .config import Config, find_default_config
from .core import (
    ClipPlan,
    Span,
    format_seconds,
    parse_spans,
    plan_clips,
    sort_spans,
)
from .errors import ConfigError, XclipsError
from .services.ffmpeg import build_command, run_ffmpeg
from .services.timestamps_file import read_spans_file


logger = logging.getLogger(__name__)


def collect_spans(timestamps_file: Optional[str], clips: Sequence[str]) -> List[Span]:
    """Gather spans from the timestamps file (if any) and the clip values, sorted.

    File spans come first in file order, then clip values in argument order;
    the combined list is sorted by start, then end.
    """
    file_spans: List[Span] = []
    if timestamps_file is not None:
        file_spans = read_spans_file(timestamps_file)
    return sort_spans(file_spans, parse_spans(clips or []))


def extract_clips(input_file: str, plans: Sequence[ClipPlan],
                  binary: str = 'ffmpeg', codec: str = 'copy') -> None:
    """Run ffmpeg once per plan, in order, stopping at the first failure.

    Clips already written are left in place.
    """
    for i, plan in enumerate(plans, 1):
        logger.info("Clip %d/%d: %s -> %s", i, len(plans), plan.span, plan.output_filename)
        command = build_command(input_file, plan.seek, plan.duration, plan.output_filename,
                                binary=binary, codec=codec)
        run_ffmpeg(command)


def print_plan(plans: Sequence[ClipPlan]) -> None:
    """Dry-run: print what would be extracted without running ffmpeg."""
    print(f"Planned clips ({len(plans)}):")
    for plan in plans:
        start_ms = plan.span.start.total_milliseconds
        end_ms = plan.span.end.total_milliseconds
        print(f"\n{plan.output_filename}")
        print(f"- Start: {plan.seek}s ({format_seconds(start_ms)})")
        print(f"- End:   {plan.span.end}s ({format_seconds(end_ms)})")
        print(f"- Duration: {plan.duration}s")


def _log_level(name) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ConfigError(f"unknown log level: {name}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='xclips',
        description='Extract clips from a media file at the given time spans using ffmpeg',
    )
    parser.add_argument('file', metavar='FILE', help='Input media file')
    parser.add_argument('-f', '--timestamps-file', dest='timestamps_file', type=str,
                        help='File with one time span per line (e.g. 1:30-1:45.5)')
    parser.add_argument('-c', '--clip', dest='clips', action='append',
                        help='Time span to extract, START-END; may be repeated')
    parser.add_argument('-o', '--output', type=str,
                        help='Base filename for the clips (defaults to FILE)')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--dry-run', dest='dry_run', action='store_true', default=None,
                        help='Print the planned clips without running ffmpeg')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def run(args: argparse.Namespace) -> None:
    """Execute one xclips run. Raises ``XclipsError`` on any fatal condition."""
    config = Config(config_file=args.config or find_default_config())
    config.update_from_args({
        'timestamps_file': args.timestamps_file,
        'clips': args.clips,
        'output': args.output,
        'dry_run': args.dry_run,
    })
    if not args.verbose:
        logging.getLogger().setLevel(_log_level(config.get('log_level', 'INFO')))

    clips = config.get('clips') or []
    if isinstance(clips, str):
        clips = [clips]
    spans = collect_spans(config.get('timestamps_file'), clips)
    output = config.get('output')
    plans = plan_clips(spans, args.file if output is None else output)
    logger.debug("Collected %d span(s)", len(spans))

    if config.get('dry_run'):
        print_plan(plans)
        return

    ffmpeg_config = config.get('ffmpeg') or {}
    extract_clips(
        args.file,
        plans,
        binary=ffmpeg_config.get('binary', 'ffmpeg'),
        codec=ffmpeg_config.get('codec', 'copy'),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point; returns the process exit status"""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # usage errors are fatal like any other; --help still exits 0
        return 1 if e.code else 0

    # Minimal logging setup; services use logging for diagnostics.
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        run(args)
    except XclipsError as e:
        logger.debug("Aborting", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
