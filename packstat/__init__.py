"""packstat: bounded-memory statistics over densely packed 12-bit streams.

A single forward pass over the bytes yields the K largest values (ascending)
and the K most recent values (oldest first).

    import packstat
    result = packstat.analyze_file("feed.bin", k=32)
    result.top, result.last

    packed = packstat.pack_values([2748, 3567])   # b"\\xab\\xcd\\xef"
"""

__version__ = "0.1.0"

from .codec import BitUnpacker, BitPacker, pack_values, unpack_array
from .config import PackStatConfig
from .errors import PackStatError, InputReadError, OutputWriteError
from .pipeline import AnalysisResult, StreamAnalyzer, analyze, analyze_file
from .report import format_report, parse_report, write_report
from .tracker import TopKTracker, LastKTracker, TopLastTracker

__all__ = [
    "AnalysisResult",
    "BitPacker",
    "BitUnpacker",
    "InputReadError",
    "LastKTracker",
    "OutputWriteError",
    "PackStatConfig",
    "PackStatError",
    "StreamAnalyzer",
    "TopKTracker",
    "TopLastTracker",
    "analyze",
    "analyze_file",
    "format_report",
    "pack_values",
    "parse_report",
    "unpack_array",
    "write_report",
]
