"""Composable assertion functions, an xUnit-style fixture runner and a bowling example."""

__version__ = "0.1.0"