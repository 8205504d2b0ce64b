"""Example rooms built with the public drawing API."""
