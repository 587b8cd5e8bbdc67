"""Output layer: Rich console, progress indicator, result formatting."""
