"""Main entry point for the stringext package."""

import sys

from loguru import logger

from stringext.cli import create_parser, format_operation_list
from stringext.core import load_config
from stringext.processing import run_pipeline
from stringext.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("StringExt - String Normalization & Encoding Helpers")
        logger.info("=" * 60)
        logger.info("")


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Operation: {config.operation}")
        if config.texts:
            logger.info(f"  Texts: {len(config.texts)} from the command line")
        else:
            logger.info(f"  Input: {config.input or 'stdin'}")
        logger.info(f"  Output: {config.output or 'stdout'} ({config.output_format})")
        logger.info("")


def _run_pipeline_with_error_handling(config) -> None:
    """Run pipeline with proper error handling."""
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_intermixed_args(argv)

    if args.list_operations:
        print(format_operation_list(), file=sys.stdout)
        return

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    _print_startup_banner(config.verbose)

    # Print configuration summary
    _print_config_summary(config)

    # Run pipeline
    _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    main()
