import pytest
from categorizer import OrderedSet, TokenBuckets, classify_token
from tokens import TokenCategory


@pytest.mark.parametrize(
    "lexeme, category",
    [
        ("int", TokenCategory.KEYWORD),
        ("include", TokenCategory.KEYWORD),
        ("+=", TokenCategory.MULTI_CHAR_OPERATOR),
        ("&&", TokenCategory.MULTI_CHAR_OPERATOR),
        ("+", TokenCategory.OPERATOR),
        ("!", TokenCategory.OPERATOR),
        (",", TokenCategory.SEPARATOR),
        (":", TokenCategory.SEPARATOR),
        ("{", TokenCategory.BRACKET),
        ("#", TokenCategory.SPECIAL_SYMBOL),
        (".", TokenCategory.SPECIAL_SYMBOL),
        ('"hi"', TokenCategory.STRING_LITERAL),
        ('"', TokenCategory.STRING_LITERAL),
        ("'a'", TokenCategory.CHAR_LITERAL),
        ("42", TokenCategory.NUMERIC_LITERAL),
        ("1.2.3", TokenCategory.NUMERIC_LITERAL),
        ('"abc', TokenCategory.UNCLASSIFIED),
        ("printf", TokenCategory.UNCLASSIFIED),
        ("agency12@r", TokenCategory.UNCLASSIFIED),
        ("$", TokenCategory.UNCLASSIFIED),
    ],
)
def test_classify_token(lexeme, category):
    assert classify_token(lexeme) == category


def test_ordered_set_keeps_first_seen_order():
    items = OrderedSet(["b", "a", "b", "c", "a"])
    assert items.snapshot() == ["b", "a", "c"]
    assert items.add("d") is True
    assert items.add("b") is False
    assert list(items) == ["b", "a", "c", "d"]
    assert len(items) == 4


def test_buckets_deduplicate():
    buckets = TokenBuckets()
    buckets.add_all(["int", "x", "=", "1", ";", "int", "y", "=", "2", ";"])
    assert buckets.get(TokenCategory.KEYWORD) == ["int"]
    assert buckets.get(TokenCategory.OPERATOR) == ["="]
    assert buckets.get(TokenCategory.NUMERIC_LITERAL) == ["1", "2"]
    assert buckets.get(TokenCategory.UNCLASSIFIED) == ["x", "y"]


def test_no_identifier_bucket():
    buckets = TokenBuckets()
    assert TokenCategory.IDENTIFIER not in buckets.snapshot()
    with pytest.raises(KeyError):
        buckets.get(TokenCategory.IDENTIFIER)


def test_snapshot_is_a_copy():
    buckets = TokenBuckets()
    buckets.add("int")
    snap = buckets.get(TokenCategory.KEYWORD)
    snap.append("float")
    assert buckets.get(TokenCategory.KEYWORD) == ["int"]


def test_quoted_literals_keep_first_seen_order_across_kinds():
    buckets = TokenBuckets()
    buckets.add_all(['"a"', "'b'", '"a"', '"c"', "'b'"])
    assert buckets.quoted_literals() == ['"a"', "'b'", '"c"']
    assert buckets.get(TokenCategory.STRING_LITERAL) == ['"a"', '"c"']
    assert buckets.get(TokenCategory.CHAR_LITERAL) == ["'b'"]
