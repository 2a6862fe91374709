from backend.engine.movevalidator.validator import validate_move

__all__ = ["validate_move"]
