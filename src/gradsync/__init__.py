"""
gradsync - Graduate registry client with a resilient sync controller.

Visitors register as graduates through a public form; a secret-gated view
lists, counts and deletes the records held by the Record Store.
"""

__version__ = "1.0.0"
