"""Fixed fan-out/fan-in concurrency demo."""
from .sampler import run_sampler, DEFAULT_UNITS, DEFAULT_MAX_DELAY

__all__ = ["run_sampler", "DEFAULT_UNITS", "DEFAULT_MAX_DELAY"]
