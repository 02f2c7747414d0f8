"""Extra iterator adaptors: combinations, products, dedup, coalescing, result-aware mapping and more."""

__version__ = "0.1.0"