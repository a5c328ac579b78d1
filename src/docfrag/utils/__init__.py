from .files import collect_source_paths, read_source

__all__ = ["collect_source_paths", "read_source"]
