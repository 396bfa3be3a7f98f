"""labsh: a minimal read-eval shell that runs one executable per line."""

__version__ = "0.1.0"
