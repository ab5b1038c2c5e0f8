"""Code Documenter.

An LLM-powered tool that walks a source tree, asks the Anthropic Claude
API to document each file, and writes the results as a mirrored tree of
Markdown files.
"""

__version__ = "0.1.0"
