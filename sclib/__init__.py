"""Small building blocks: CRC-32C, a min-heap, an INI parser, a linked list and a growable array."""

__version__ = "2.0.0"