import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .app.config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV
    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from .errors import ErrorKind, FragmentError, InvalidInputError, MalformedMarkersError
from .extraction import parse_content, scan
from .models import CodeFile, CodeFragment

__version__ = "0.1.0"

__all__: list[str] = [
    "CodeFile",
    "CodeFragment",
    "ErrorKind",
    "FragmentError",
    "InvalidInputError",
    "MalformedMarkersError",
    "__version__",
    "parse_content",
    "scan",
]
