"""Rules and state of a two-player card battle game: cards, slots, players and the board cursor."""

__version__ = "0.1.0"