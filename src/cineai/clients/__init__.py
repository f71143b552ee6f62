from .base import CompletionClient, MetadataClient, TransportError
from .factory import build_completion_client, build_metadata_client
from .openai import OpenAICompletionClient
from .tmdb import TMDBClient, tmdb_client

__all__ = [
    "CompletionClient",
    "MetadataClient",
    "OpenAICompletionClient",
    "TMDBClient",
    "TransportError",
    "build_completion_client",
    "build_metadata_client",
    "tmdb_client",
]
