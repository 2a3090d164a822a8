"""skillscout: multilingual skill recommendation for coding agents."""
