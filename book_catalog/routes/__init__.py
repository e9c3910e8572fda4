"""HTTP routes (Flask blueprints) and the error pipeline."""
