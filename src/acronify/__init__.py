"""
Acronify: local-first mnemonic notes.

Turns free text into something easier to remember:
- Acronyms with a letter-by-letter breakdown
- Short extractive summaries
- A local, searchable collection of both
"""

__version__ = "0.1.0"
