"""Plain-text report: sorted top-K block followed by the last-K block."""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from .config import PackStatConfig
from .errors import OutputWriteError
from .pipeline import AnalysisResult


def format_report(result: AnalysisResult, config: Optional[PackStatConfig] = None) -> str:
    """Render a result as header line, one value per line, twice."""
    if config is None:
        config = PackStatConfig(k=result.k)
    top_header, last_header = config.headers()
    lines = [top_header]
    lines.extend(str(v) for v in result.top)
    lines.append(last_header)
    lines.extend(str(v) for v in result.last)
    return "\n".join(lines) + "\n"


def write_report(result: AnalysisResult, path: Union[str, Path],
                 config: Optional[PackStatConfig] = None) -> int:
    """Write the report to ``path``.

    Returns:
        Number of characters written.

    Raises:
        OutputWriteError: If the destination cannot be opened or written.
    """
    text = format_report(result, config)
    try:
        with open(path, "w") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(path, e) from e
    return len(text)


def parse_report(text: str) -> Tuple[List[int], List[int]]:
    """Read a report back into (top, last) value lists.

    Header lines are recognised by their ``--`` prefix; the first block is
    the top-K block, the second the last-K block.
    """
    blocks: List[List[int]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("--"):
            blocks.append([])
            continue
        if not blocks:
            raise ValueError(f"Value before first header: {line!r}")
        blocks[-1].append(int(line))
    if len(blocks) != 2:
        raise ValueError(f"Expected 2 report sections, found {len(blocks)}")
    return blocks[0], blocks[1]
