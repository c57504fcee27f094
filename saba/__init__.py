"""Building blocks of a small toy web browser: URLs, a JavaScript lexer, script values, colours, geometry and computed styles."""

__version__ = "0.1.0"