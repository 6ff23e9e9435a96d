"""Core domain primitives shared by every example."""
