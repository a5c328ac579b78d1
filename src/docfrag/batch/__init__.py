from .collectors import BatchScan, SourceFile, scan_many

__all__: list[str] = ["BatchScan", "SourceFile", "scan_many"]
