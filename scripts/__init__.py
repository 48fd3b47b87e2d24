"""
Command-line drivers for the Block-U engine.
"""
