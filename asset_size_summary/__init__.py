"""Compare production asset sizes between a pull request and its base branch."""

__version__ = "0.1.0"
