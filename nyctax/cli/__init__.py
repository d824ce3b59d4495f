"""NYC Tax CLI."""
