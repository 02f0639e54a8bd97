"""
Core functionality for inflation adjustment.

This package contains the index resolution algorithm, the price adjuster
built on it and the evaluator that broadcasts adjustment over ranges.
"""
