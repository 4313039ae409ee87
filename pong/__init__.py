"""Two-player Pong: simulation core, input resolution and presentation."""
