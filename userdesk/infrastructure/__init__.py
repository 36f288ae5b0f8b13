"""Infrastructure layer: persistence and command-line front-end."""
