"""Build-time generator of timezone source tables from parsed zone records."""
