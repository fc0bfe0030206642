"""isolderthan: check whether a file is older than a given age."""

__version__ = "1.0.0"
