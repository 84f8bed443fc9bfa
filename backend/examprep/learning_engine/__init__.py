"""Learning engine: question selection policies."""
