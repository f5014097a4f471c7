"""Value types for a messages API: tools, sampling parameters, usage and versions."""

__version__ = "0.1.0"
__all__ = ["version", "top_k", "top_p", "usage", "tool"]