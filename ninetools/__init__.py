"""Command-line tools: bitcoin rate lookup, RPN calculator and merge-insertion sort."""

__version__ = "0.1.0"
__all__ = ["bitcoin_exchange", "rpn", "pmerge"]