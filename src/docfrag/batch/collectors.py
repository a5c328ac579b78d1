import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from returns.result import Failure, Result, Success

from ..errors import FragmentError
from ..extraction import scan
from ..models import CodeFile, CodeFragment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SourceFile:
    """The path and full text of one file handed over by a file-retrieval collaborator."""

    path: str
    content: str


@dataclass(frozen=True)
class BatchScan:
    """Outcome of scanning many files, with failing files kept apart."""

    code_files: tuple[CodeFile, ...]
    failures: tuple[FragmentError, ...]

    @property
    def fragments(self) -> tuple[CodeFragment, ...]:
        """All fragments of all successfully scanned files, file by file."""
        return tuple(f for code_file in self.code_files for f in code_file.code_fragments)

    @property
    def succeeded(self) -> bool:
        return not self.failures


def _scan_source(source: SourceFile) -> Result[CodeFile, FragmentError]:
    return scan(source.path, source.content)


def _scan_each(
    sources: Sequence[SourceFile], max_workers: int | None
) -> list[Result[CodeFile, FragmentError]]:
    if max_workers is None or max_workers <= 1 or len(sources) <= 1:
        return [_scan_source(source) for source in sources]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_scan_source, sources))


def scan_many(sources: Iterable[SourceFile], max_workers: int | None = None) -> BatchScan:
    """Scan files independently, returning both the scanned files and the failures.

    A file with malformed markers is reported in ``failures`` and the
    remaining files are still scanned. Results keep the input order even when
    ``max_workers`` spreads the work over a thread pool.
    """
    code_files = []
    failures = []

    for result in _scan_each(list(sources), max_workers):
        match result:
            case Success(code_file):
                code_files.append(code_file)
            case Failure(error):
                logger.warning("Skipping file: %s", error)
                failures.append(error)

    return BatchScan(code_files=tuple(code_files), failures=tuple(failures))


__all__ = ["BatchScan", "SourceFile", "scan_many"]
