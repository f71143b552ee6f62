from .catalog import CatalogService
from .factory import Services, build_services
from .recommendation import CompletionOptions, RecommendationFailed, RecommendationService
from .resolution import resolve_titles
from .search import InvalidQuery, SearchFailed, SearchService, no_results_message

__all__ = [
    "CatalogService",
    "CompletionOptions",
    "InvalidQuery",
    "RecommendationFailed",
    "RecommendationService",
    "SearchFailed",
    "SearchService",
    "Services",
    "build_services",
    "no_results_message",
    "resolve_titles",
]
