import uuid

import pytest

from molliekit.idempotency import (
    TEST_KEY_EXPECTED,
    KeyGenerator,
    NopGenerator,
    StdGenerator,
)


def test_nop_generator_is_a_key_generator_returning_its_key():
    generator = NopGenerator("dummy")
    assert isinstance(generator, KeyGenerator)
    assert generator.generate() == "dummy"


def test_generate_default():
    assert NopGenerator("").generate() == TEST_KEY_EXPECTED
    assert NopGenerator().generate() == "test_ikg_key"


def test_generate_non_default():
    generated = NopGenerator("testing").generate()
    assert generated != TEST_KEY_EXPECTED
    assert generated == "testing"


def test_nop_generator_is_stable():
    generator = NopGenerator("dummy")
    first = generator.generate()
    second = generator.generate()
    assert first == "dummy"
    assert second == "dummy"


def test_std_generator_is_a_key_generator():
    generator = StdGenerator()
    assert isinstance(generator, KeyGenerator)
    assert len(generator.generate()) == 36


def test_standard_generator():
    key = StdGenerator().generate()
    assert len(key) == 36
    assert key != StdGenerator().generate()
    assert uuid.UUID(key).version == 4


def test_key_generator_is_abstract():
    with pytest.raises(TypeError):
        KeyGenerator()