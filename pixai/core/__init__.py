"""Core orchestration package.

Architectural role:
    Exposes `PixAIClient`, the layer between entrypoints (CLI, library callers)
    and the job lifecycle components in `pixai.jobs` and `pixai.artifacts`.
"""

from pixai.core.engine import PixAIClient

__all__ = ["PixAIClient"]
