"""C-library style helpers: characters, byte buffers, strings, output, line reading, printf and signal messaging."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "output",
    "linereader",
    "printf",
    "talk_protocol",
    "talk_client",
    "talk_server",
]