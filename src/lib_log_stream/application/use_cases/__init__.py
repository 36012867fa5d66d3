"""Use cases built on top of the domain and ports."""
