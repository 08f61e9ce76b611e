"""
Unit tests for DefaultHashingService and the module-level compute_digests.

Tests verify:
- Published vectors for every algorithm through the full file path
- Identical digests under mapped, full-buffer and chunked reading
- Variant choices only affect their own algorithm
- Open and mid-stream failures become error strings for every algorithm
"""

import io

import pytest

from filedigest import compute_digests
from filedigest.core.exceptions import SourceReadError, UnknownAlgorithmError
from filedigest.core.models.config import IOConfig
from filedigest.hashing.algorithms import Algorithm, GostVariant, TigerVariant
from filedigest.hashing.registry import HashAlgorithmRegistry
from filedigest.hashing.sources import ChunkedSource, IOStrategy
from filedigest.services.hashing import DefaultHashingService

from vectors import ABC_VECTORS, EMPTY_VECTORS, GOST_TEST_ABC, TIGER2_ABC

ALL = list(Algorithm)


class FailingStream(io.BytesIO):
    """Stream that raises once `fail_at` bytes have been read."""

    def __init__(self, data: bytes, fail_at: int) -> None:
        super().__init__(data)
        self.fail_at = fail_at

    def read(self, size=-1):
        if self.tell() >= self.fail_at:
            raise OSError(5, "Input/output error")
        return super().read(size)


class TestComputeDigests:
    """Tests for the public compute_digests entry point."""

    def test_abc_all_algorithms(self, abc_file):
        results = compute_digests(str(abc_file), ALL)
        assert results == [(alg, ABC_VECTORS[alg]) for alg in ALL]

    def test_empty_file_all_algorithms(self, empty_file):
        results = compute_digests(str(empty_file), ALL)
        assert results == [(alg, EMPTY_VECTORS[alg]) for alg in ALL]

    def test_results_in_declaration_order(self, abc_file):
        """Requested order and duplicates do not affect the output."""
        requested = [Algorithm.ADLER32, Algorithm.MD5, Algorithm.SHA1, Algorithm.MD5]
        results = compute_digests(str(abc_file), requested)
        assert [alg for alg, _ in results] == [Algorithm.MD5, Algorithm.SHA1, Algorithm.ADLER32]

    def test_only_requested_algorithms(self, abc_file):
        results = compute_digests(str(abc_file), [Algorithm.CRC32])
        assert results == [(Algorithm.CRC32, "352441c2")]

    def test_no_algorithms(self, abc_file):
        assert compute_digests(str(abc_file), []) == []

    def test_accepts_algorithm_names(self, abc_file):
        results = compute_digests(str(abc_file), ["sha256", "Tiger"])
        assert results == [
            (Algorithm.SHA256, ABC_VECTORS[Algorithm.SHA256]),
            (Algorithm.TIGER192, ABC_VECTORS[Algorithm.TIGER192]),
        ]

    def test_unknown_algorithm_name_raises(self, abc_file):
        with pytest.raises(UnknownAlgorithmError):
            compute_digests(str(abc_file), ["md6"])

    def test_missing_file_reports_error_for_every_algorithm(self, tmp_path):
        results = compute_digests(str(tmp_path / "missing.bin"), [Algorithm.MD5, Algorithm.GOST])
        assert [alg for alg, _ in results] == [Algorithm.MD5, Algorithm.GOST]
        texts = {text for _, text in results}
        assert len(texts) == 1
        text = texts.pop()
        assert text.startswith("Error: ")
        assert "No such file" in text

    def test_variant_selection(self, abc_file):
        results = dict(
            compute_digests(
                str(abc_file),
                [Algorithm.GOST, Algorithm.TIGER192],
                gost_variant=GostVariant.TEST,
                tiger_variant=TigerVariant.TIGER2,
            )
        )
        assert results == {Algorithm.GOST: GOST_TEST_ABC, Algorithm.TIGER192: TIGER2_ABC}


class TestStrategyEquivalence:
    """Digests must not depend on how the file was read."""

    def test_all_strategies_agree(self, sample_file, sample_data, io_config_for, io_strategy):
        registry = HashAlgorithmRegistry()
        service = DefaultHashingService(registry, io_config=io_config_for(io_strategy))
        results = service.compute_digests(str(sample_file), ALL)
        expected = [(alg, registry.compute_hash(alg, sample_data)) for alg in ALL]
        assert results == expected

    def test_sequential_matches_parallel(self, sample_file, io_config_for):
        parallel = DefaultHashingService(io_config=io_config_for(IOStrategy.MAPPED))
        sequential = DefaultHashingService(
            io_config=io_config_for(IOStrategy.MAPPED, parallel=False)
        )
        assert parallel.compute_digests(str(sample_file), ALL) == sequential.compute_digests(
            str(sample_file), ALL
        )

    def test_single_algorithm_on_contiguous_source(self, abc_file, io_config_for):
        """One algorithm never goes through the dispatcher."""
        service = DefaultHashingService(io_config=io_config_for(IOStrategy.MAPPED))
        assert service.compute_digests(str(abc_file), [Algorithm.SHA1]) == [
            (Algorithm.SHA1, ABC_VECTORS[Algorithm.SHA1])
        ]


class TestVariantIndependence:
    """Changing a variant leaves every other digest untouched."""

    def test_gost_variant_only_changes_gost(self, sample_file):
        service = DefaultHashingService(io_config=IOConfig())
        crypto = dict(service.compute_digests(str(sample_file), ALL))
        test = dict(service.compute_digests(str(sample_file), ALL, gost_variant=GostVariant.TEST))
        changed = {alg for alg in ALL if crypto[alg] != test[alg]}
        assert changed == {Algorithm.GOST}

    def test_tiger_variant_only_changes_tiger(self, sample_file):
        service = DefaultHashingService(io_config=IOConfig())
        tiger = dict(service.compute_digests(str(sample_file), ALL))
        tiger2 = dict(
            service.compute_digests(str(sample_file), ALL, tiger_variant=TigerVariant.TIGER2)
        )
        changed = {alg for alg in ALL if tiger[alg] != tiger2[alg]}
        assert changed == {Algorithm.TIGER192}


class TestReadFailures:
    """Read failures never yield partial digests."""

    def test_mid_stream_failure(self, sample_data):
        service = DefaultHashingService(io_config=IOConfig())
        source = ChunkedSource("stream", FailingStream(sample_data, fail_at=3000), len(sample_data), 1000)
        results = service.compute(source, [Algorithm.MD5, Algorithm.SHA256, Algorithm.CRC32])
        assert results == dict.fromkeys(
            [Algorithm.MD5, Algorithm.SHA256, Algorithm.CRC32],
            "Error reading file: [Errno 5] Input/output error",
        )

    def test_full_buffer_failure(self, abc_file, monkeypatch):
        def failing_open_source(*args, **kwargs):
            raise SourceReadError("device went away", file_path=str(abc_file))

        monkeypatch.setattr("filedigest.services.hashing.open_source", failing_open_source)
        service = DefaultHashingService(io_config=IOConfig())
        results = service.compute_digests(str(abc_file), [Algorithm.MD5, Algorithm.SHA1])
        assert results == [
            (Algorithm.MD5, "Error reading file: device went away"),
            (Algorithm.SHA1, "Error reading file: device went away"),
        ]
