import io

import pytest

from algodemos.huffman import (
    build_huffman_tree,
    count_symbols,
    encode,
    generate_codes,
    main,
    mask_vowels,
)


def _decode(root, bits):
    out = []
    node = root
    for bit in bits:
        node = node.left if bit == "0" else node.right
        if node.is_leaf:
            out.append(node.symbol)
            node = root
    return "".join(out)


def _internal_sum(node):
    if node.is_leaf:
        return 0
    return node.freq + _internal_sum(node.left) + _internal_sum(node.right)


def test_mask_vowels_only_lowercase():
    assert mask_vowels("AEIOU aeiou") == "AEIOU *****"


def test_count_symbols_sorted_and_complete():
    text = mask_vowels("hello world")
    counts = count_symbols(text)
    assert list(counts) == sorted(counts)
    assert sum(counts.values()) == len(text)
    assert counts["*"] == text.count("*")


@pytest.mark.parametrize("text", ["hello world", "abracadabra", "mississippi river", "zz yy x"])
def test_round_trip(text):
    masked = mask_vowels(text)
    root = build_huffman_tree(count_symbols(masked))
    codes = generate_codes(root)
    assert _decode(root, encode(masked, codes)) == masked


@pytest.mark.parametrize("text", ["hello world", "abracadabra", "the quick brown fox"])
def test_codes_are_prefix_free(text):
    codes = generate_codes(build_huffman_tree(count_symbols(mask_vowels(text))))
    values = list(codes.values())
    for a in values:
        for b in values:
            if a != b:
                assert not b.startswith(a)


def test_encoded_length_equals_internal_weight():
    text = mask_vowels("the quick brown fox jumps over the lazy dog")
    frequencies = count_symbols(text)
    root = build_huffman_tree(frequencies)
    codes = generate_codes(root)
    assert len(encode(text, codes)) == _internal_sum(root)
    assert root.freq == len(text)


def test_two_symbols_tie_keeps_order():
    codes = generate_codes(build_huffman_tree({"a": 1, "b": 1}))
    assert codes == {"a": "0", "b": "1"}


def test_single_symbol_gets_empty_code():
    codes = generate_codes(build_huffman_tree({"x": 3}))
    assert codes == {"x": ""}


def test_empty_frequencies_raise():
    with pytest.raises(ValueError):
        build_huffman_tree({})


def test_non_positive_frequency_raises():
    with pytest.raises(ValueError):
        build_huffman_tree({"a": 0, "b": 2})


def test_encode_unknown_symbol_raises():
    with pytest.raises(ValueError):
        encode("abc", {"a": "0", "b": "1"})


def test_main_prints_codes_and_encoding(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("banana\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Character '*':" in out
    encoded = out.strip().splitlines()[-1]
    assert set(encoded) <= {"0", "1"}


def test_main_empty_input_fails(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 1