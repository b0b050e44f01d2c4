from .loader import LoadResult, load_profile_data

__all__ = ["LoadResult", "load_profile_data"]
