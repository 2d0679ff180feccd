"""Application services: user updates and the shared password rule."""
