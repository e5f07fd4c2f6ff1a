"""Small algorithms and data structures, with command-line front ends for some of them."""

__version__ = "0.1.0"