from npuzzle.engine.gamestate.state import GameState, SessionStatus

__all__ = ["GameState", "SessionStatus"]
