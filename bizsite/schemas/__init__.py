"""Content schemas. Each module validates one content source and raises a ContentValidationError subclass."""
