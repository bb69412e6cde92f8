from proximity_sort.components import tokenize


def test_tokenize_splits_on_separator():
    assert tokenize(b"foobar/controller/admin.rb") == [b"foobar", b"controller", b"admin.rb"]


def test_tokenize_empty_and_no_separator():
    assert tokenize(b"") == []
    assert tokenize(b"main.txt") == [b"main.txt"]


def test_tokenize_strips_leading_curdir():
    assert tokenize(b"./first.txt") == [b"first.txt"]
    assert tokenize(b"././second.txt") == [b"second.txt"]
    assert tokenize(b".") == []
    assert tokenize(b"./") == []


def test_tokenize_keeps_root_and_parent_components():
    assert tokenize(b"/usr/lib") == [b"/", b"usr", b"lib"]
    assert tokenize(b"../a") == [b"..", b"a"]


def test_tokenize_ignores_repeated_and_trailing_separators():
    assert tokenize(b"a//b/") == [b"a", b"b"]
    assert tokenize(b"/") == [b"/"]


def test_tokenize_is_case_sensitive_and_byte_exact():
    assert tokenize(b"A/b") != tokenize(b"a/b")
    # not valid utf-8, still splits
    assert tokenize(b"\xff\xfe/x") == [b"\xff\xfe", b"x"]


def test_tokenize_alternate_separator():
    assert tokenize(b"a\\b/c", sep=b"\\", altsep=b"/") == [b"a", b"b", b"c"]
    assert tokenize(b"a\\b", sep=b"/", altsep=None) == [b"a\\b"]
