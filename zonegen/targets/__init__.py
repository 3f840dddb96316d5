"""Built-in output backends, looked up by name."""
from __future__ import annotations

from typing import Callable

from ..base import GeneratorBackend
from .simple import SimpleGenerator

BACKENDS: dict[str, Callable[[], GeneratorBackend]] = {
    SimpleGenerator.name: SimpleGenerator,
}


def backend_names() -> list[str]:
    return sorted(BACKENDS)


def get_backend(name: str) -> GeneratorBackend:
    """Instantiate the backend called name (case-insensitive)."""
    factory = BACKENDS.get(name.lower().strip())
    if factory is None:
        raise ValueError(f"Unknown backend '{name}'. Supported backends: {', '.join(backend_names())}")
    return factory()
