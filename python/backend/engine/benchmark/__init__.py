from backend.engine.benchmark.timer import Timer, benchmark

__all__ = ["Timer", "benchmark"]
