"""scrabcore: rules core for a 15x15 tile-placement word game."""
