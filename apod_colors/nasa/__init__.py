"""Client for NASA's Astronomy Picture of the Day API."""

from .apod_client import ApodClient, ApodMetadata, ApodRequestError

__all__ = ["ApodClient", "ApodMetadata", "ApodRequestError"]
