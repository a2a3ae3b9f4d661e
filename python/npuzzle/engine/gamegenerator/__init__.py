from npuzzle.engine.gamegenerator.generator import Shuffler

__all__ = ["Shuffler"]
