"""quotex: ask questions over pasted documents and get source-grounded quote candidates."""

__version__ = "0.1.0"
