"""Domain layer: exceptions independent of web framework and storage backends."""
