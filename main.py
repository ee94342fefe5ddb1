"""
Review Reports - batch review query utility

CLI entry point for loading the reviews CSV and printing the fixed reports.
"""

import argparse
import logging
import sys

from src.ingestion.review_loader import ReviewLoadError
from src.orchestrator import ReportOrchestrator
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Review Reports - query a product reviews CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the default reports for the bundled data
  python main.py

  # Use another file and include the category reports
  python main.py --input exports/reviews.csv --all-reports
        """
    )

    parser.add_argument(
        "--input",
        default=str(settings.DEFAULT_REVIEWS_CSV),
        help=f"Reviews CSV (default: {settings.DEFAULT_REVIEWS_CSV})"
    )

    parser.add_argument(
        "--all-reports",
        action="store_true",
        help="Also print the Tech and Home category reports"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        orchestrator = ReportOrchestrator(
            csv_path=args.input,
            include_category_reports=args.all_reports
        )
        orchestrator.run(sys.stdout)

        logger.info("Review Reports completed successfully")
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Run interrupted by user")
        sys.exit(1)

    except ReviewLoadError as e:
        # Loader already logged the cause
        print(f"Failed to load reviews: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
