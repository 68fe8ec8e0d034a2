"""Staged construction."""

from .staged_builder import BuilderState, BuildResult, StagedBuilder, create_builder

__all__ = ["BuilderState", "BuildResult", "StagedBuilder", "create_builder"]
