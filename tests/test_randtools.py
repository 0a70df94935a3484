import string

import pytest

from ledfx.randtools import LETTERS, file_exists, rand_string


@pytest.mark.parametrize("n", [1, 10, 64, 200])
def test_rand_string_length_and_alphabet(n):
    value = rand_string(n)
    assert len(value) == n
    assert set(value) <= set(LETTERS)


def test_rand_string_empty():
    assert rand_string(0) == ""


def test_rand_string_negative_raises():
    with pytest.raises(ValueError):
        rand_string(-1)


def test_rand_string_varies():
    values = {rand_string(32) for _ in range(20)}
    assert len(values) > 1


def test_rand_string_uses_only_ascii_letters():
    value = rand_string(2000)
    assert set(value) <= set(string.ascii_letters)
    assert any(c.islower() for c in value)
    assert any(c.isupper() for c in value)


def test_file_exists_for_file_and_dir(tmp_path):
    target = tmp_path / "config.json"
    target.write_text("{}")
    assert file_exists(target) is True
    assert file_exists(str(tmp_path)) is True


def test_file_exists_missing(tmp_path):
    assert file_exists(tmp_path / "missing.json") is False