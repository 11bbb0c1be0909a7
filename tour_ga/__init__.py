"""
Generational evolutionary search for short closed tours over a small weighted graph.
"""

__all__ = [
    "data",
    "evaluation",
    "evolutionary",
    "operators",
    "report",
]
