# tests/test_bits.py

import math
import random

from digitrig import bits


def test_float32_bit_patterns():
    assert bits.float_to_int_bits(1.0) == 0x3F800000
    assert bits.float_to_int_bits(-2.0) == -1073741824  # 0xC0000000 as signed
    assert bits.float_to_int_bits(0.0) == 0
    assert bits.float_to_int_bits(-0.0) == -2 ** 31
    assert bits.int_bits_to_float(0x3F800000) == 1.0
    assert bits.int_bits_to_float(0x7F800000) == math.inf
    assert bits.int_bits_to_float(-1073741824) == -2.0
    assert math.isnan(bits.int_bits_to_float(0x7FC00000))


def test_float32_round_trip():
    random.seed(42)
    for _ in range(1000):
        b = random.getrandbits(32) & 0x7F7FFFFF  # positive, finite
        assert bits.float_to_int_bits(bits.int_bits_to_float(b)) == b


def test_double_bit_patterns():
    assert bits.double_to_long_bits(1.0) == 0x3FF0000000000000
    assert bits.double_to_long_bits(-0.0) == -2 ** 63
    assert bits.long_bits_to_double(0x4000000000000000) == 2.0
    assert bits.long_bits_to_double(-2 ** 63) == 0.0
    assert bits.double_to_high_int_bits(1.0) == 0x3FF00000
    assert bits.double_to_high_int_bits(-1.0) == -1074790400  # 0xBFF00000 as signed
    random.seed(42)
    for _ in range(1000):
        x = random.uniform(-1e10, 1e10)
        assert bits.long_bits_to_double(bits.double_to_long_bits(x)) == x


def test_to_float32():
    assert bits.to_float32(0.1) == 0.10000000149011612
    assert bits.to_float32(1.5) == 1.5
    assert bits.to_float32(1e39) == math.inf
    assert bits.to_float32(-1e39) == -math.inf
    assert math.isnan(bits.to_float32(math.nan))


def test_next_power_of_two():
    assert bits.next_power_of_two(0) == 2
    assert bits.next_power_of_two(1) == 2
    assert bits.next_power_of_two(2) == 2
    assert bits.next_power_of_two(3) == 4
    assert bits.next_power_of_two(1024) == 1024
    assert bits.next_power_of_two(1025) == 2048
    assert bits.next_power_of_two(-7) == 2


def test_modular_multiplicative_inverse():
    random.seed(42)
    for _ in range(1000):
        a = random.getrandbits(32) | 1
        inv = bits.modular_multiplicative_inverse_32(a)
        assert -2 ** 31 <= inv < 2 ** 31
        assert (a * inv) & 0xFFFFFFFF == 1

        a64 = random.getrandbits(64) | 1
        inv64 = bits.modular_multiplicative_inverse_64(a64)
        assert -2 ** 63 <= inv64 < 2 ** 63
        assert (a64 * inv64) & 0xFFFFFFFFFFFFFFFF == 1
    assert bits.modular_multiplicative_inverse_32(1) == 1
    assert bits.modular_multiplicative_inverse_32(-1) == -1
