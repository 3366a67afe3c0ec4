from .ladder import EloConfig, LadderService, LadderState, StateStore

__all__ = ["EloConfig", "LadderService", "LadderState", "StateStore"]
