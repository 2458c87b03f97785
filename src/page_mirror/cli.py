"""Command-line interface for page-mirror."""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from page_mirror.clients import WebClient
from page_mirror.clients.client import DEFAULT_USER_AGENT
from page_mirror.exceptions import MirrorError
from page_mirror.pipeline.orchestrator import DEFAULT_ASSETS_DIR, MirrorOrchestrator
from page_mirror.reporters import MetadataReporter

DEFAULT_OUTPUT_DIR = Path(".")
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRIES = 3


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


@dataclass
class BatchReport:
    """Outcome of mirroring a list of URLs.

    Attributes:
        mirrored: URLs whose mirrored HTML was written
        reported: URLs whose metadata was emitted
        errors: One message per failed stage, in processing order
    """

    mirrored: list[str] = field(default_factory=list)
    reported: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def run_batch(
    urls: list[str],
    orchestrator: MirrorOrchestrator,
    reporter: MetadataReporter,
) -> BatchReport:
    """Mirror and report each URL in order.

    A failure for one URL is logged and recorded; it never stops the
    remaining URLs, and a failed mirror does not skip the metadata report
    for the same URL.

    Args:
        urls: Page URLs to process
        orchestrator: Mirror orchestrator for the page pass
        reporter: Metadata reporter for the summary pass

    Returns:
        BatchReport for the whole run
    """
    logger = logging.getLogger(__name__)
    report = BatchReport()

    for url in urls:
        try:
            orchestrator.mirror(url)
            report.mirrored.append(url)
        except MirrorError as e:
            logger.error(e.message)
            report.errors.append(e.message)

        try:
            metadata = reporter.report(url)
        except MirrorError as e:
            logger.error(e.message)
            report.errors.append(e.message)
            continue

        for line in metadata.to_lines():
            print(line)
        report.reported.append(url)

    return report


def mirror_pages(args: argparse.Namespace) -> int:
    """Execute the mirror command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every URL succeeded, 1 if any stage failed)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = {
        "timeout": args.timeout,
        "retry_attempts": args.retries,
        "headers": {"User-Agent": args.user_agent},
    }

    with WebClient(config) as client:
        orchestrator = MirrorOrchestrator(
            client=client,
            assets_dir=args.assets_dir,
            output_dir=args.output_dir,
            per_page_assets=args.per_page_assets,
            origin_join=args.origin_join,
        )
        reporter = MetadataReporter(client=client)
        report = run_batch(args.urls, orchestrator, reporter)

    if not report.ok:
        logger.warning(
            f"Finished with {len(report.errors)} error(s); "
            f"mirrored {len(report.mirrored)} of {len(args.urls)} pages"
        )
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="page-mirror",
        description="Save web pages with their images, stylesheets and scripts for offline viewing",
    )
    parser.add_argument(
        "urls",
        nargs="+",
        metavar="URL",
        help="Page URL to mirror (processed in order)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--assets-dir",
        type=Path,
        default=DEFAULT_ASSETS_DIR,
        help=f"Directory for downloaded assets (default: {DEFAULT_ASSETS_DIR})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Directory for mirrored HTML files (default: current directory)",
    )
    parser.add_argument(
        "--per-page-assets",
        action="store_true",
        help="Store each page's assets in its own subdirectory",
    )
    parser.add_argument(
        "--origin-join",
        action="store_true",
        help="Resolve root-relative references against the page's origin",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--retries",
        type=int,
        default=DEFAULT_RETRIES,
        help=f"Attempts per request on connection errors (default: {DEFAULT_RETRIES})",
    )
    parser.add_argument(
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        help=f"User-Agent header (default: {DEFAULT_USER_AGENT})",
    )
    parser.set_defaults(func=mirror_pages)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
