"""Search algorithms for sorted sequences, small utilities and a micro-benchmark runner."""

__version__ = "0.1.0"
__all__ = ["bench", "cpplib", "search"]