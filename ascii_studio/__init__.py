"""ASCII Studio: block-letter art from a remote figlet rendering backend."""

__version__ = "0.1.0"
