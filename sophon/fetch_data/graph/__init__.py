from .graph_client import GraphClient, GraphFetchError
from .models import Achievement, Artifact, EventSnapshot, IndexingMeta, Planet, Player, Transfer

__all__ = [
    "GraphClient",
    "GraphFetchError",
    "Achievement",
    "Artifact",
    "EventSnapshot",
    "IndexingMeta",
    "Planet",
    "Player",
    "Transfer",
]
