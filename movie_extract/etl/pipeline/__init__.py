"""Pipeline orchestration and command line interface."""

from movie_extract.etl.pipeline.orchestrator import PipelineResult, run_pipeline

__all__ = [
    "PipelineResult",
    "run_pipeline",
]
