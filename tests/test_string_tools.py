"""字符串转换测试"""

import random
import string
import threading

import pytest

from tools import StringTransformer, to_upper, reverse, uppercase, reverse_string

SAMPLES = [
    "",
    "a",
    "abc",
    "Hello World!",
    "racecar",
    "MiXeD 123 !?",
    "tab\tand\nnewline",
    "ß café ÿ",
]

_rng = random.Random(20261019)
RANDOM_TEXTS = [
    "".join(_rng.choice(string.printable + "ßéÿ") for _ in range(_rng.randint(0, 64)))
    for _ in range(50)
]
RANDOM_BYTES = [bytes(_rng.randrange(256) for _ in range(_rng.randint(0, 64))) for _ in range(50)]


class TestToUpper:
    def test_lowercase_input(self):
        assert to_upper("abc") == "ABC"

    def test_mixed_input(self):
        assert to_upper("Hello World!") == "HELLO WORLD!"

    def test_empty(self):
        assert to_upper("") == ""

    @pytest.mark.parametrize("text", ["0123456789", "!@#$%^&*()_+-=[]{};':,./<>?", " \t\n", "ABC XYZ"])
    def test_non_lowercase_unchanged(self, text):
        assert to_upper(text) == text

    def test_only_single_byte_letters_mapped(self):
        # ß 和 é 不在单字节字母映射范围内
        assert to_upper("straße café") == "STRAßE CAFé"

    def test_bytes(self):
        assert to_upper(b"hello, world 42") == b"HELLO, WORLD 42"

    def test_bytes_outside_alphabet_unchanged(self):
        data = bytes(range(256))
        result = to_upper(data)
        assert len(result) == 256
        for i in range(256):
            expected = i - 32 if ord("a") <= i <= ord("z") else i
            assert result[i] == expected

    def test_bytearray_not_mutated(self):
        data = bytearray(b"abc")
        result = to_upper(data)
        assert result == bytearray(b"ABC")
        assert data == bytearray(b"abc")
        assert result is not data

    @pytest.mark.parametrize("text", SAMPLES)
    def test_length_preserved(self, text):
        assert len(to_upper(text)) == len(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        assert to_upper(to_upper(text)) == to_upper(text)


class TestReverse:
    def test_reverse(self):
        assert reverse("abc") == "cba"

    def test_palindrome(self):
        assert reverse("racecar") == "racecar"

    def test_empty(self):
        assert reverse("") == ""

    def test_single_char(self):
        assert reverse("x") == "x"

    def test_bytes(self):
        assert reverse(b"\x00\x01\xff") == b"\xff\x01\x00"

    def test_bytearray_not_mutated(self):
        data = bytearray(b"abc")
        result = reverse(data)
        assert result == bytearray(b"cba")
        assert data == bytearray(b"abc")

    def test_palindrome_bytearray_is_new_object(self):
        data = bytearray(b"abba")
        result = reverse(data)
        assert result == data
        assert result is not data

    @pytest.mark.parametrize("text", SAMPLES)
    def test_length_preserved(self, text):
        assert len(reverse(text)) == len(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_involution(self, text):
        assert reverse(reverse(text)) == text


def test_module_functions_match_static_methods():
    assert to_upper("abc") == StringTransformer.to_upper("abc")
    assert reverse("abc") == StringTransformer().reverse("abc")


def test_concurrent_calls():
    results = {}

    def worker(i):
        text = f"item-{i}"
        results[i] = (to_upper(text), reverse(text))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for i in range(20):
        assert results[i] == (f"ITEM-{i}", f"item-{i}"[::-1])


class TestLangchainTools:
    def test_uppercase_invoke(self):
        assert uppercase.invoke({"text": "Hello World!"}) == "HELLO WORLD!"

    def test_reverse_string_invoke(self):
        assert reverse_string.invoke({"text": "abc"}) == "cba"

    def test_tool_names(self):
        assert uppercase.name == "uppercase"
        assert reverse_string.name == "reverse_string"

    def test_empty_text(self):
        assert uppercase.invoke({"text": ""}) == ""
        assert reverse_string.invoke({"text": ""}) == ""


class TestRandomInputs:
    @pytest.mark.parametrize("text", RANDOM_TEXTS + RANDOM_BYTES)
    def test_length_preserved(self, text):
        assert len(to_upper(text)) == len(text)
        assert len(reverse(text)) == len(text)

    @pytest.mark.parametrize("text", RANDOM_TEXTS + RANDOM_BYTES)
    def test_involution(self, text):
        assert reverse(reverse(text)) == text

    @pytest.mark.parametrize("text", RANDOM_TEXTS + RANDOM_BYTES)
    def test_idempotent(self, text):
        assert to_upper(to_upper(text)) == to_upper(text)

    @pytest.mark.parametrize("text", RANDOM_TEXTS)
    def test_only_ascii_lowercase_changes(self, text):
        for before, after in zip(text, to_upper(text)):
            if "a" <= before <= "z":
                assert after == chr(ord(before) - 32)
            else:
                assert after == before
