"""Extraction pipeline: extractors, loaders and run orchestration."""
