from collections.abc import Iterable
from pathlib import Path

from returns.result import Result, safe

from ..app import config
from ..batch import SourceFile
from ..languages import supported_extensions


def read_source(
    path: Path, encoding: str = config.DEFAULT_SOURCE_ENCODING
) -> Result[SourceFile, str]:
    """Read a file into a ``SourceFile``, keeping its line endings untouched.

    A leading byte order mark is dropped whatever the encoding, so a marker on
    the first line is still recognized.
    """
    return (
        safe(lambda: path.read_bytes().decode(encoding))()
        .map(lambda text: text.removeprefix(config.BYTE_ORDER_MARK))
        .map(lambda text: SourceFile(path=path.as_posix(), content=text))
        .alt(lambda exc: f"{path}: {exc}")
    )


def collect_source_paths(paths: Iterable[Path]) -> list[Path]:
    """Expand directories into the registry-supported files they contain.

    Files named explicitly are kept whatever their extension; scanning a file
    in an unknown language simply yields no fragments.
    """
    extensions = set(supported_extensions())
    collected: list[Path] = []
    for path in paths:
        if path.is_dir():
            collected.extend(
                sorted(p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in extensions)
            )
        else:
            collected.append(path)
    return collected


__all__ = ["collect_source_paths", "read_source"]
