"""Runtime dependency wiring."""

from .dependencies import RuntimeDeps
from .bootstrap import build_runtime_deps

__all__ = ["RuntimeDeps", "build_runtime_deps"]
