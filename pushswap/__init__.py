"""Sort integers with two stacks and list the stack operations used."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]