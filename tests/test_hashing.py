# tests/test_hashing.py
import pytest
from scope_context.hashing import ctx_hash, DEFAULT_CAPACITY
from scope_context.errors import InvalidKeyError, NullPointerError

def test_known_bucket_values():
    # (acc + b) * b, reducido en cada byte
    assert ctx_hash("a") == 193
    assert ctx_hash("b") == 132
    assert ctx_hash("ab") == 102

def test_empty_key_hashes_to_zero():
    assert ctx_hash("") == 0

def test_non_ascii_key_uses_utf8_bytes():
    # 'é' -> 0xC3 0xA9
    assert ctx_hash("é") == 2

def test_result_always_in_range():
    for key in ["x", "longer_name", "ñandú", "z" * 255, "_tmp0"]:
        assert 0 <= ctx_hash(key) < DEFAULT_CAPACITY
        assert 0 <= ctx_hash(key, 7) < 7

def test_small_capacity_collisions():
    # con capacidad 4 todo byte impar cae en el bucket 1 y todo par en el 0
    assert ctx_hash("a", 4) == ctx_hash("c", 4) == ctx_hash("e", 4) == 1
    assert ctx_hash("b", 4) == ctx_hash("d", 4) == 0

def test_deterministic():
    assert ctx_hash("counter") == ctx_hash("counter")

@pytest.mark.parametrize("capacity", [0, -1, 2.5, True])
def test_invalid_capacity_raises(capacity):
    with pytest.raises(ValueError):
        ctx_hash("a", capacity)

def test_none_key_is_null_pointer():
    with pytest.raises(NullPointerError):
        ctx_hash(None)

def test_non_string_key_is_invalid():
    with pytest.raises(InvalidKeyError):
        ctx_hash(b"a")
