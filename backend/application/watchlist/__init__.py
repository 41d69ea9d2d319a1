from application.watchlist.watchlist_actions import WatchlistActions, WatchlistNotice
from application.watchlist.watchlist_movies_service import WatchlistMoviesService

__all__ = ["WatchlistActions", "WatchlistMoviesService", "WatchlistNotice"]
