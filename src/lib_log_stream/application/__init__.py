"""Application layer: ports and use cases for the log writers."""
