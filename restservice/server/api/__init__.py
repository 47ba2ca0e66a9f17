"""HTTP routes exposed by the server."""
