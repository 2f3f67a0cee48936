"""Binary Tree Formatter: build a random min-heap and print it as a tree."""

__version__ = "0.2.0"
