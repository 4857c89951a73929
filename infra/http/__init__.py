from .url_file_fetcher import UrlFileFetcher

__all__ = ["UrlFileFetcher"]
