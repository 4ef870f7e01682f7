"""
QuillCV - Resume record to LaTeX source compiler

Turns a structured resume record into a complete, compilable LaTeX document by
substituting rendered sections into a macro-based template shell.

Architecture:
- Templating Context: escaping, keyed macro arguments, section rendering,
  template loading and document assembly
- Utils: logging setup, text helpers, timestamps
"""

__version__ = "0.1.0"
