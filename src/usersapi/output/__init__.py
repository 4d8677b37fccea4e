"""Output layer: render response envelopes for humans or machines."""
