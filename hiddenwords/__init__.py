"""Hidden words: find words hidden in a letter grid."""

__version__ = "0.1.0"
