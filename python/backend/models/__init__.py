from backend.models.board import DIM_MAX, DIM_MIN, NOT_FOUND, Board, Position

__all__ = ["Board", "DIM_MAX", "DIM_MIN", "NOT_FOUND", "Position"]
