"""Battleship game modules."""
