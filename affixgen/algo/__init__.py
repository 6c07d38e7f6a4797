from .generator import WordGenerator, GenerationResult
from .string_metrics import distance, distance_limited, distance_weighted

__all__ = [
    "WordGenerator",
    "GenerationResult",
    "distance",
    "distance_limited",
    "distance_weighted"
]
