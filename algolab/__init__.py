"""Textbook sorting, selection, dynamic-programming and string-matching algorithms that report the work they did."""

__version__ = "0.1.0"
__all__ = ["activity", "chains", "lcs", "sorting", "strings", "subarray", "subsets"]