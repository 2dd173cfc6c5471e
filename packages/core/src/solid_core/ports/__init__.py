from .filter import IFilter

__all__ = [
    "IFilter",
]
