"""Algorithm solutions on strings, sentences, bits, arrays, heaps, recursion and small data structures."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "heaps", "recursion", "sentences", "strings", "structures"]