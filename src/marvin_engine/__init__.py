"""Word-wise selection and line editing engine for text editors."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "runtime",
    "text",
]

__version__ = "0.1.0"
