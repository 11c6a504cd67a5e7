"""Tests for the pseudo-random byte generator."""

from __future__ import annotations

import threading

import pytest

from hello_todo_api.app.core.random_bytes import ByteGenerator, RandomByteGenerator, hex_encode


class TestGenerate:
    """Tests for RandomByteGenerator.generate."""

    @pytest.mark.parametrize("count", [1, 2, 255, 256, 1000])
    def test_should_return_exactly_count_bytes(self, count: int) -> None:
        data = RandomByteGenerator().generate(count)
        assert isinstance(data, bytes)
        assert len(data) == count
        assert all(0 <= b <= 255 for b in data)

    def test_should_return_empty_bytes_for_zero(self) -> None:
        assert RandomByteGenerator().generate(0) == b""

    def test_should_reject_negative_count(self) -> None:
        with pytest.raises(ValueError):
            RandomByteGenerator().generate(-1)

    def test_same_seed_produces_same_sequence(self) -> None:
        first = RandomByteGenerator(seed=1234).generate(128)
        second = RandomByteGenerator(seed=1234).generate(128)
        assert first == second

    def test_successive_calls_continue_the_stream(self) -> None:
        generator = RandomByteGenerator(seed=99)
        assert generator.generate(64) != generator.generate(64)

    def test_large_sample_covers_most_byte_values(self) -> None:
        data = RandomByteGenerator(seed=7).generate(100_000)
        assert len(set(data)) == 256


class TestSeed:
    """Tests for the one-time seeding guard."""

    def test_is_seeded_after_construction(self) -> None:
        assert RandomByteGenerator().seeded

    def test_second_seed_call_is_ignored(self) -> None:
        generator = RandomByteGenerator(seed=1)
        generator.seed(2)
        assert generator.generate(32) == RandomByteGenerator(seed=1).generate(32)

    def test_concurrent_seed_calls_do_not_reseed(self) -> None:
        generator = RandomByteGenerator(seed=5)
        barrier = threading.Barrier(8)

        def reseed(value: int) -> None:
            barrier.wait()
            generator.seed(value)

        threads = [threading.Thread(target=reseed, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert generator.generate(32) == RandomByteGenerator(seed=5).generate(32)


def test_generator_satisfies_protocol() -> None:
    generator: ByteGenerator = RandomByteGenerator()
    assert len(generator.generate(3)) == 3


def test_hex_encode_is_lowercase_two_chars_per_byte() -> None:
    assert hex_encode(b"\x00\x0f\xab\xff") == "000fabff"
    assert hex_encode(b"") == ""
