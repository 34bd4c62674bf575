"""File storage building blocks: libraries, repositories and storage backends."""

__version__ = "0.1.0"