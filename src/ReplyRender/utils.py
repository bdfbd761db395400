from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

FORMAT_SUFFIXES = {"html": ".html", "txt": ".txt", "docx": ".docx"}


def configure_logging(verbose: bool = False) -> None:
    """Configure a simple console logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(message)s",
    )


def resolve_output_path(input_path: Path, output: Optional[str], fmt: str = "html") -> Path:
    if fmt not in FORMAT_SUFFIXES:
        raise ValueError(f"Unknown output format: {fmt}")
    suffix = FORMAT_SUFFIXES[fmt]
    if output:
        out_path = Path(output)
        if out_path.is_dir():
            out_path = out_path / f"{input_path.stem}{suffix}"
        return out_path
    return input_path.with_suffix(suffix)


def read_reply(path: Path) -> str:
    return path.read_text(encoding="utf-8")
