from academy.models.player import Player

__all__ = [
    "Player",
]
