"""Tests for the analysis pipeline and packing."""

import io
import warnings

import numpy as np
import pytest

import packstat
from packstat.codec.packer import BitPacker, pack_values
from packstat.config import PackStatConfig
from packstat.errors import InputReadError
from packstat.pipeline import StreamAnalyzer, analyze, analyze_file


class TestPackValues:
    """Test the inverse packer used to build inputs."""

    def test_known_layout(self):
        """0xABC, 0xDEF pack to AB CD EF."""
        assert pack_values([0xABC, 0xDEF]) == b"\xab\xcd\xef"

    def test_odd_count_pads_nibble(self):
        """An odd value count ends with a zero-filled half byte."""
        assert pack_values([0xABC]) == b"\xab\xc0"
        assert len(pack_values([1, 2, 3])) == 5

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            pack_values([4096])
        with pytest.raises(ValueError):
            pack_values([-1])
        with pytest.raises(ValueError):
            pack_values(np.array([0, 5000]))

    def test_incremental_matches_batch(self):
        """BitPacker.write one at a time equals pack_values."""
        rng = np.random.RandomState(5)
        values = rng.randint(0, 4096, size=37)
        packer = BitPacker()
        for v in values:
            packer.write(v)
        assert packer.flush() == pack_values(values)

    def test_unpacks_back(self):
        """Packed random values unpack to the same sequence."""
        rng = np.random.RandomState(11)
        values = rng.randint(0, 4096, size=200).astype(np.uint16)
        np.testing.assert_array_equal(packstat.unpack_array(pack_values(values)), values)


class TestStreamAnalyzer:
    """Test the unpacker-to-tracker pipeline."""

    def test_known_bytes(self):
        """AB CD EF gives the two standard values in both readouts."""
        result = analyze(b"\xab\xcd\xef", k=3)
        assert result.top == [2748, 3567]
        assert result.last == [2748, 3567]
        assert result.n_values == 2
        assert result.n_bytes == 3
        assert result.discarded_bits == 0

    def test_sample_k3(self):
        result = analyze(pack_values([5, 1, 9, 2, 8, 3]), k=3)
        assert result.top == [5, 8, 9]
        assert result.last == [2, 8, 3]
        assert result.k == 3

    def test_partial_trailing_value_dropped(self):
        """The padding nibble of an odd count yields no value."""
        result = analyze(pack_values([1, 2, 3]), k=32)
        assert result.n_values == 3
        assert result.last == [1, 2, 3]
        assert result.discarded_bits == 4

    def test_single_byte(self):
        result = analyze(b"\xff")
        assert result.top == []
        assert result.last == []
        assert result.discarded_bits == 8

    def test_empty_input(self):
        result = analyze(b"")
        assert result.n_values == 0
        assert result.top == [] and result.last == []

    def test_default_k_random_stream(self):
        """Default K=32 readouts match direct computation."""
        rng = np.random.RandomState(2024)
        values = rng.randint(0, 4096, size=1000).tolist()
        result = analyze(pack_values(values))
        assert result.k == 32
        assert result.top == sorted(values)[-32:]
        assert result.last == values[-32:]

    def test_unaligned_chunks(self):
        """Reading in odd-sized chunks gives the same result."""
        rng = np.random.RandomState(8)
        values = rng.randint(0, 4096, size=301).tolist()
        data = pack_values(values)
        for chunk_size in (1, 2, 4, 7, 64):
            analyzer = StreamAnalyzer(k=16, chunk_size=chunk_size)
            n_read = analyzer.consume(io.BytesIO(data))
            result = analyzer.result()
            assert n_read == len(data)
            assert result.top == sorted(values)[-16:]
            assert result.last == values[-16:]

    def test_feed_returns_completed_count(self):
        analyzer = StreamAnalyzer(k=4)
        assert analyzer.feed(b"\xab") == 0
        assert analyzer.feed(b"\xcd") == 1
        assert analyzer.feed(b"\xef\x12\x34") == 2

    def test_result_is_idempotent(self):
        analyzer = StreamAnalyzer(k=3)
        analyzer.feed(pack_values([5, 1, 9, 2, 8, 3]))
        assert analyzer.result() == analyzer.result()

    def test_reset(self):
        analyzer = StreamAnalyzer(k=3)
        analyzer.feed(b"\xab\xcd")
        analyzer.reset()
        analyzer.feed(b"\x12\x34\x56")
        result = analyzer.result()
        assert result.last == [0x123, 0x456]
        assert result.n_bytes == 3

    def test_warn_on_partial(self):
        """Opt-in warning when input ends mid-value."""
        analyzer = StreamAnalyzer(config=PackStatConfig(k=4, warn_on_partial=True))
        analyzer.feed(b"\xab\xcd")
        with pytest.warns(UserWarning, match="4 trailing bits"):
            analyzer.result()

    def test_no_warning_by_default(self):
        analyzer = StreamAnalyzer(k=4)
        analyzer.feed(b"\xab")
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            analyzer.result()

    def test_config_and_k_conflict(self):
        """k or chunk_size alongside config is rejected."""
        config = PackStatConfig(k=4)
        with pytest.raises(ValueError):
            StreamAnalyzer(k=5, config=config)
        with pytest.raises(ValueError):
            StreamAnalyzer(chunk_size=8, config=config)
        assert StreamAnalyzer(config=config).tracker.k == 4
        assert StreamAnalyzer().tracker.k == 32


class TestAnalyzeFile:
    """Test file-based analysis."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "feed.bin"
        path.write_bytes(pack_values([5, 1, 9, 2, 8, 3]))
        result = analyze_file(path, k=3)
        assert result.top == [5, 8, 9]
        assert result.last == [2, 8, 3]

    def test_str_path(self, tmp_path):
        path = tmp_path / "feed.bin"
        path.write_bytes(b"\xab\xcd\xef")
        assert analyze_file(str(path)).top == [2748, 3567]

    def test_missing_file(self, tmp_path):
        """Unreadable input raises InputReadError naming the path."""
        missing = tmp_path / "nope.bin"
        with pytest.raises(InputReadError) as exc_info:
            analyze_file(missing)
        assert exc_info.value.path == str(missing)
        assert "Cannot open file to read" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_k_with_config_rejected(self, tmp_path):
        path = tmp_path / "feed.bin"
        path.write_bytes(b"\xab\xcd\xef")
        with pytest.raises(ValueError):
            analyze_file(path, k=5, config=PackStatConfig(k=2))

    def test_config_overrides_k(self, tmp_path):
        path = tmp_path / "feed.bin"
        path.write_bytes(pack_values(list(range(10))))
        result = analyze_file(path, config=PackStatConfig(k=2, chunk_size=5))
        assert result.top == [8, 9]
        assert result.last == [8, 9]


class TestConfig:
    """Test PackStatConfig validation."""

    def test_defaults(self):
        config = PackStatConfig()
        assert config.k == 32
        assert config.headers() == ("--Sorted Max 32 Values--", "--Last 32 Values--")

    def test_invalid(self):
        with pytest.raises(ValueError):
            PackStatConfig(k=0)
        with pytest.raises(ValueError):
            PackStatConfig(chunk_size=0)
