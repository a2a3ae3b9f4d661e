from npuzzle.engine.gamesolver.solvability import count_inversions, is_solvable

__all__ = ["count_inversions", "is_solvable"]
