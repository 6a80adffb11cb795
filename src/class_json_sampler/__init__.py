"""Sample JSON generation from declared class types."""
