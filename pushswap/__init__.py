"""Sort integers with two stacks and a fixed instruction set, and check instruction sequences."""

__version__ = "1.0.0"