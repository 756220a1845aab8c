"""
codecondense - condense a source tree into its declarations.

Walks a directory, reduces each supported source file to its imports, global
variables and function signatures, and writes everything into one combined
text file. Function summaries can optionally be generated by an LLM.
"""

__version__ = "1.0.0"
