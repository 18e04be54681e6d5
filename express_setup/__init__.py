"""Interactive CLI for setting up Express projects with TypeScript/JavaScript."""

__version__ = "1.0.0"
