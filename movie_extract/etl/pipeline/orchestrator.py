"""Pipeline orchestration: extract a genre, then save the records."""

from dataclasses import dataclass
from pathlib import Path

from movie_extract.etl.extractors.imdb import IMDbExtractor
from movie_extract.etl.loaders import LoaderStats, get_loader
from movie_extract.etl.types import RunResult
from movie_extract.etl.utils import setup_logger
from movie_extract.settings import get_settings_summary, settings

logger = setup_logger(
    "etl.pipeline.orchestrator",
    settings.logging.level,
    settings.paths.log_file,
)


@dataclass
class PipelineResult:
    """Outcome of a full run.

    Attributes:
        run: Extraction result (records, terminal state, stats).
        output: Stats of the written file.
    """

    run: RunResult
    output: LoaderStats


async def run_pipeline(
    genre: str,
    count: int,
    output_format: str = "json",
    output_dir: Path | None = None,
    extractor: IMDbExtractor | None = None,
) -> PipelineResult:
    """Extract up to ``count`` movies of a genre and write them out.

    An aborted extraction still writes whatever was collected.

    Args:
        genre: Catalog genre token.
        count: Target record count.
        output_format: "json" or "csv".
        output_dir: Output directory override.
        extractor: Extractor override.

    Returns:
        PipelineResult with run and output statistics.

    Raises:
        SerializationFailure: On unsupported format (before any
            request is made) or write error.
    """
    loader = get_loader(output_format, output_dir)
    extractor = extractor or IMDbExtractor()
    logger.debug(f"Configuration: {get_settings_summary()}")

    run = await extractor.extract(genre, count)

    if run.aborted:
        logger.warning(
            f"Run aborted after {run.pages_fetched} page(s); "
            f"saving {len(run.records)} partial record(s)"
        )

    output = loader.load(run.records)
    logger.info(f"✅ Pipeline finished: {len(run.records)} movies -> {output.path}")
    return PipelineResult(run=run, output=output)
