"""A small interactive shell with one pipe, output redirection and cd/exit built-ins."""

__version__ = "0.1.0"
__all__ = ["commands", "executor", "parser", "shell"]