from application.catalog.movie_loader import MovieLoader

__all__ = ["MovieLoader"]
