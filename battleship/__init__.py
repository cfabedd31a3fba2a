"""Single-player Battleship against a random-shooting computer."""
