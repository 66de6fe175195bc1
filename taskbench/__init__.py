"""Small self-contained utilities: calculator, Huffman coding, bit streams, lists, traffic, JSON table and cell formats."""

__version__ = "0.1.0"