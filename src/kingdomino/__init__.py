"""Kingdom board model and placement engine for the Kingdomino tile game."""
