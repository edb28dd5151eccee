"""REST API for site layouts."""
