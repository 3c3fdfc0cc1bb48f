from .bfs_solver import BFSSolver, SearchError, SearchEvent, SearchResult
from .search_tree import SearchNode

__all__ = [
    'BFSSolver',
    'SearchError',
    'SearchEvent',
    'SearchNode',
    'SearchResult',
]
