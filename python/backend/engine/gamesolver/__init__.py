from backend.engine.gamesolver.path import moves_of, reconstruct
from backend.engine.gamesolver.solver import (
    Solver,
    SolverConfig,
    SolverStats,
    Strategy,
    best_first,
    breadth_first,
)

__all__ = [
    "Solver",
    "SolverConfig",
    "SolverStats",
    "Strategy",
    "best_first",
    "breadth_first",
    "moves_of",
    "reconstruct",
]
