"""Single-pass analysis of a packed 12-bit stream.

Bytes go through a BitUnpacker; every completed value updates a
TopLastTracker. Readouts are taken once the input is exhausted.

Usage:
    analyzer = StreamAnalyzer(k=32)
    with open("feed.bin", "rb") as f:
        analyzer.consume(f)
    result = analyzer.result()
    result.top, result.last
"""

import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from .codec.unpacker import BitUnpacker
from .config import PackStatConfig
from .errors import InputReadError
from .tracker.combined import TopLastTracker


@dataclass
class AnalysisResult:
    """Readouts and counters from one analysis run."""
    k: int
    top: List[int] = field(default_factory=list)    # ascending
    last: List[int] = field(default_factory=list)   # oldest first
    n_values: int = 0
    n_bytes: int = 0
    discarded_bits: int = 0


class StreamAnalyzer:
    """Owns the unpacker and tracker state for one processing run."""

    def __init__(self, k: Optional[int] = None, chunk_size: Optional[int] = None,
                 config: Optional[PackStatConfig] = None):
        """Build the per-run state.

        Args:
            k: Collection capacity (default 32).
            chunk_size: Bytes per read in consume() (default 65536).
            config: Full configuration. Mutually exclusive with k and
                chunk_size.
        """
        if config is None:
            config = PackStatConfig(
                k=32 if k is None else k,
                chunk_size=65536 if chunk_size is None else chunk_size,
            )
        elif k is not None or chunk_size is not None:
            raise ValueError("pass either config or k/chunk_size, not both")
        self.config = config
        self.unpacker = BitUnpacker()
        self.tracker = TopLastTracker(config.k)

    def feed(self, data: Union[bytes, bytearray, memoryview]) -> int:
        """Push a chunk of packed bytes.

        Returns:
            Number of values completed by this chunk.
        """
        values = self.unpacker.feed_chunk(data)
        self.tracker.update_many(values.tolist())
        return len(values)

    def consume(self, fileobj: BinaryIO) -> int:
        """Read ``fileobj`` to exhaustion in ``chunk_size`` pieces.

        Returns:
            Number of bytes read.
        """
        n_read = 0
        while True:
            chunk = fileobj.read(self.config.chunk_size)
            if not chunk:
                break
            n_read += len(chunk)
            self.feed(chunk)
        return n_read

    def result(self) -> AnalysisResult:
        discarded = self.unpacker.discarded_bits
        if discarded and self.config.warn_on_partial:
            warnings.warn(
                f"Input ended mid-value; discarding {discarded} trailing bits"
            )
        return AnalysisResult(
            k=self.tracker.k,
            top=self.tracker.top_values(),
            last=self.tracker.last_values(),
            n_values=self.tracker.count,
            n_bytes=self.unpacker.bytes_consumed,
            discarded_bits=discarded,
        )

    def reset(self):
        self.unpacker.reset()
        self.tracker.reset()


def analyze(data: Union[bytes, bytearray, memoryview], k: int = 32) -> AnalysisResult:
    """Analyze an in-memory packed buffer."""
    analyzer = StreamAnalyzer(k=k)
    analyzer.feed(data)
    return analyzer.result()


def analyze_file(path: Union[str, Path], k: Optional[int] = None,
                 config: Optional[PackStatConfig] = None) -> AnalysisResult:
    """Analyze a packed binary file.

    ``k`` defaults to 32; it cannot be combined with ``config``.

    Raises:
        ValueError: If both k and config are given.
        InputReadError: If the file cannot be opened or read.
    """
    analyzer = StreamAnalyzer(k=k, config=config)
    try:
        with open(path, "rb") as f:
            analyzer.consume(f)
    except OSError as e:
        raise InputReadError(path, e) from e
    return analyzer.result()
