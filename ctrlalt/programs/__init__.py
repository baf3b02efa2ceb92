"""Namespace for programs that run on the simulated board; it currently holds none."""

__all__: list[str] = []