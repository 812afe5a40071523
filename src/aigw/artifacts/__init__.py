"""Artifact post-processing: fetch and persist generated binary content."""

from aigw.artifacts.fetcher import ArtifactFetcher, HTTPArtifactFetcher
from aigw.artifacts.models import ArtifactOutcome, ArtifactReference, extract_references
from aigw.artifacts.processor import ArtifactProcessor

__all__ = [
    "ArtifactFetcher",
    "ArtifactOutcome",
    "ArtifactProcessor",
    "ArtifactReference",
    "HTTPArtifactFetcher",
    "extract_references",
]
