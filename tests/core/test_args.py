from pathlib import Path

import pytest
import typer

from docfrag.core.args import create_scan_config
from docfrag.core.config import OutputFormat
from docfrag.events import FunctionMode


def _config(tmp_path: Path, **overrides):
    options = {
        "paths": [tmp_path],
        "encoding": "utf-8",
        "max_workers": 1,
        "as_json": False,
        "event_mode": None,
        "show_content": False,
    }
    options.update(overrides)
    return create_scan_config(**options)


def test_create_scan_config_defaults_to_table(tmp_path: Path) -> None:
    cfg = _config(tmp_path)
    assert cfg.paths == (tmp_path,)
    assert cfg.output is OutputFormat.TABLE
    assert cfg.encoding == "utf-8"


def test_event_mode_implies_json(tmp_path: Path) -> None:
    cfg = _config(tmp_path, event_mode=FunctionMode.UPDATE)
    assert cfg.output is OutputFormat.JSON
    assert cfg.event_mode is FunctionMode.UPDATE


def test_encoding_is_normalized(tmp_path: Path) -> None:
    assert _config(tmp_path, encoding=" Latin-1 ").encoding == "iso8859-1"


def test_missing_path_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(typer.BadParameter, match="does not exist"):
        _config(tmp_path, paths=[tmp_path / "nope"])


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"encoding": "no-such-codec"}, "encoding"),
        ({"max_workers": 0}, "max_workers"),
        ({"paths": []}, "paths"),
    ],
)
def test_invalid_options_are_reported_per_field(tmp_path: Path, overrides, field: str) -> None:
    with pytest.raises(typer.BadParameter) as exc_info:
        _config(tmp_path, **overrides)
    assert f"• {field}" in str(exc_info.value)
