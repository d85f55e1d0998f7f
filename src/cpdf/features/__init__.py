"""Feature packages for cpdf."""
