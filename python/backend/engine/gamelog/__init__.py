from backend.engine.gamelog.log import GameLog

__all__ = ["GameLog"]
