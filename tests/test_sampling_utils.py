# tests/test_sampling_utils.py
from collections import Counter

import pytest

from conftest import CycleSource, FailingSource, SequenceSource
from securepass.audit_utils import audit_sampler
from securepass.errors import EntropySourceError
from securepass.memory_utils import is_wiped
from securepass.sampling_utils import UnbiasedSampler, sample_index, secure_shuffle


class TestUnbiasedSampler:
    def test_single_value_range_consumes_no_entropy(self, failing_source) -> None:
        sampler = UnbiasedSampler(failing_source)
        assert sampler.index(1) == 0
        assert failing_source.calls == 0
        assert sampler.chunks_drawn == 0

    @pytest.mark.parametrize("n", [0, -5])
    def test_empty_range_rejected(self, n: int) -> None:
        with pytest.raises(ValueError):
            UnbiasedSampler().index(n)

    def test_biased_tail_is_rejected(self) -> None:
        # n=3 -> limit 255, so 255 must be redrawn
        sampler = UnbiasedSampler(SequenceSource(bytes([255, 7])), chunk_size=2)
        assert sampler.index(3) == 1

    def test_multiple_rejections(self) -> None:
        # n=200 -> limit 200
        sampler = UnbiasedSampler(SequenceSource(bytes([200, 255, 199])), chunk_size=3)
        assert sampler.index(200) == 199

    def test_full_byte_range_never_rejects(self) -> None:
        sampler = UnbiasedSampler(SequenceSource(bytes([255])), chunk_size=1)
        assert sampler.index(256) == 255

    def test_wide_range_uses_four_bytes(self) -> None:
        # n=1000 -> 32-bit draw, limit 4294967000; 0xFFFFFFFF is rejected
        data = bytes([0xFF, 0xFF, 0xFF, 0xFF, 0x00, 0x00, 0x04, 0x01])
        sampler = UnbiasedSampler(SequenceSource(data), chunk_size=8)
        assert sampler.index(1000) == 1025 % 1000

    def test_huge_range(self) -> None:
        n = 1 << 40
        sampler = UnbiasedSampler(CycleSource(b"\x00\x01"), chunk_size=16)
        assert 0 <= sampler.index(n) < n

    def test_entropy_drawn_in_chunks(self) -> None:
        source = CycleSource(b"\x05")
        sampler = UnbiasedSampler(source, chunk_size=64)
        for _ in range(100):
            sampler.index(16)
        assert sampler.chunks_drawn == 2
        assert source.calls == 2

    def test_rejected_bytes_are_not_reused(self) -> None:
        # with only rejectable bytes left the sampler must go back to the source
        source = SequenceSource(bytes([255, 255]))
        sampler = UnbiasedSampler(source, chunk_size=2)
        with pytest.raises(EntropySourceError):
            sampler.index(3)
        assert source.calls == 2

    def test_source_failure_propagates(self, failing_source) -> None:
        with pytest.raises(EntropySourceError):
            UnbiasedSampler(failing_source).index(10)

    def test_close_wipes_pool(self) -> None:
        with UnbiasedSampler(CycleSource(b"\xAB"), chunk_size=32) as sampler:
            sampler.index(10)
            assert not is_wiped(sampler._pool)
        assert is_wiped(sampler._pool)

    def test_consumed_bytes_are_zeroed(self) -> None:
        sampler = UnbiasedSampler(CycleSource(b"\x11"), chunk_size=4)
        sampler.index(2)
        assert sampler._pool[0] == 0
        assert sampler._pool[1] == 0x11

    def test_invalid_chunk_size(self) -> None:
        with pytest.raises(ValueError):
            UnbiasedSampler(chunk_size=0)

    def test_fill(self) -> None:
        dest = bytearray(10)
        with UnbiasedSampler() as sampler:
            sampler.fill(dest, b"xyz", start=2)
        assert dest[:2] == b"\x00\x00"
        assert set(dest[2:]) <= set(b"xyz")

    def test_fill_empty_alphabet(self) -> None:
        with pytest.raises(ValueError):
            UnbiasedSampler().fill([0, 0], "")

    def test_choice(self) -> None:
        sampler = UnbiasedSampler(CycleSource(b"\x02"))
        assert sampler.choice("abc") == "c"

    def test_sample_index(self) -> None:
        assert sample_index(1) == 0
        for _ in range(50):
            assert 0 <= sample_index(7) < 7


class TestUniformity:
    @pytest.mark.parametrize("n", [3, 62, 200, 300])
    def test_chi_squared_accepts_sampler_output(self, n: int) -> None:
        report = audit_sampler(n, samples=n * 400)
        assert report.passes(alpha=1e-6), report

    def test_every_index_reachable(self) -> None:
        seen = Counter(sample_index(5) for _ in range(500))
        assert set(seen) == {0, 1, 2, 3, 4}


class TestSecureShuffle:
    def test_preserves_multiset(self) -> None:
        items = list("aabbbcdddd")
        shuffled = list(items)
        secure_shuffle(shuffled)
        assert sorted(shuffled) == sorted(items)

    def test_bytearray_in_place(self) -> None:
        buf = bytearray(b"password")
        ref = buf
        secure_shuffle(buf)
        assert ref is buf
        assert sorted(buf) == sorted(b"password")

    def test_fisher_yates_order(self) -> None:
        # all-zero entropy: swap(2, 0) then swap(1, 0)
        buf = ["a", "b", "c"]
        secure_shuffle(buf, UnbiasedSampler(CycleSource(b"\x00")))
        assert buf == ["b", "c", "a"]

    @pytest.mark.parametrize("items", [[], ["x"]])
    def test_trivial_buffers_need_no_entropy(self, items, failing_source) -> None:
        secure_shuffle(items, UnbiasedSampler(failing_source))
        assert failing_source.calls == 0

    def test_all_permutations_occur(self) -> None:
        seen = Counter()
        with UnbiasedSampler() as sampler:
            for _ in range(3000):
                buf = [1, 2, 3]
                secure_shuffle(buf, sampler)
                seen[tuple(buf)] += 1
        assert len(seen) == 6
        # 500 expected per permutation
        assert min(seen.values()) > 350
