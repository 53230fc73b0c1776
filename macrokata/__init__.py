"""A runner that tests, checks and diffs macro exercises, with Python katas for each."""

__version__ = "0.1.0"