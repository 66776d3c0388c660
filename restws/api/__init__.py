"""HTTP shell over the resolution engine."""
