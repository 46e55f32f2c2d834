"""
Print Spooler

A process-wide, thread-safe print spooler: one lazily created shared instance
guarding an insertion-ordered queue of documents submitted by concurrent producers.
"""

__version__ = "1.0.0"
