"""Lazy iterator adaptors for merging, peeking, padding, permuting, grouping and zipping."""

__version__ = "0.1.0"