from backend.engine.gamegenerator.generator import (
    MAX_STARS,
    MIN_STARS,
    PLAYABLE_PIECES,
    GameGenerator,
)

__all__ = ["MAX_STARS", "MIN_STARS", "PLAYABLE_PIECES", "GameGenerator"]
