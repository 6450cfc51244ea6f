"""Card model and IO collaborators shared by the game engine."""
