"""Main processing pipeline: collect inputs, apply the operation, write results."""

import time

from loguru import logger
from tqdm import tqdm

from stringext.core import Config, OperationResult, get_operation
from stringext.processing.output import generate_output
from stringext.utils.helpers import read_input_lines


def collect_inputs(config: Config) -> list[str]:
    """Gather input texts from positional arguments, a file or stdin.

    Lines are stripped when strip_lines is set; blank lines are dropped when
    skip_blank is set.
    """
    texts = list(config.texts) if config.texts else read_input_lines(config.input)

    if config.strip_lines:
        texts = [text.strip() for text in texts]
    if config.skip_blank:
        texts = [text for text in texts if text.strip()]

    return texts


def apply_operation(config: Config, texts: list[str]) -> list[OperationResult]:
    """Run the configured operation over every text, in order."""
    operation = get_operation(config.operation)

    texts_iter = texts
    if config.verbose:
        texts_iter = tqdm(texts, desc=f"Applying {operation.name}", unit="line")

    return [OperationResult(input=text, output=operation.apply(text)) for text in texts_iter]


def run_pipeline(config: Config) -> list[OperationResult]:
    """Main processing pipeline.

    Args:
        config: Validated configuration

    Returns:
        One result per input text, in input order
    """
    start_time = time.time()

    texts = collect_inputs(config)
    if config.verbose:
        logger.info(f"Loaded {len(texts)} inputs")

    results = apply_operation(config, texts)

    generate_output(results, config.output, config.output_format, config.verbose)

    elapsed_time = time.time() - start_time
    if config.verbose:
        logger.info(f"Processed {len(results)} inputs in {elapsed_time:.2f}s")

    return results
