"""Infrastructure layer: storage backends behind the repository protocol."""
