"""
Best Reads - API REST do catálogo de autores e livros.
"""

__version__ = "0.1.0"
