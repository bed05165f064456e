"""Artifact download and local persistence."""

from pixai.artifacts.fetcher import ArtifactFetcher, build_filename

__all__ = ["ArtifactFetcher", "build_filename"]
