"""Remove files and directories, with prompting and root protection."""

__version__ = "0.1.0"

__all__ = ["__version__"]