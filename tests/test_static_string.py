import pytest

from emblib.static_string import StaticString


def test_source_sequence():
    str1 = StaticString(17, "Hello, world!")
    assert len(str1) == 13
    assert len(str(str1)) == 13
    assert str1.front() == "H"
    assert str1.back() == "!"

    str1.pop_back()
    assert len(str(str1)) == 12
    assert str1.back() == "d"

    str1.push_back("?")
    assert str1[12] == "?"
    assert str1.back() == "?"
    assert len(str1) == 13

    str1.insert(0, "-")
    assert str1.front() == "-"
    assert len(str(str1)) == 14

    str1.insert(2, "i")
    assert str1[2] == "i"

    str1.insert(len(str1), "@")
    assert str(str1) == "-Hiello, world?@"
    assert str1.full()

    str1.clear()
    assert len(str1) == 0
    assert str(str1) == ""


def test_full_rejects_more():
    s = StaticString(3, "ab")
    assert s.full()
    with pytest.raises(IndexError):
        s.push_back("c")
    with pytest.raises(IndexError):
        s.insert(0, "c")


def test_text_is_truncated_to_capacity():
    s = StaticString(4, "abcdef")
    assert str(s) == "abc"
    assert s.capacity() == 4


def test_empty_access_raises():
    s = StaticString(5)
    assert s.empty()
    with pytest.raises(IndexError):
        s.front()
    with pytest.raises(IndexError):
        s.back()
    with pytest.raises(IndexError):
        s.pop_back()
    with pytest.raises(IndexError):
        s[0]


def test_resize():
    s = StaticString(8, "abc")
    s.resize(5, "x")
    assert str(s) == "abcxx"
    s.resize(2)
    assert str(s) == "ab"
    with pytest.raises(ValueError):
        s.resize(8)


def test_equality_and_setitem():
    a = StaticString(8, "abc")
    b = StaticString(8, "abd")
    assert a != b
    b[2] = "c"
    assert a == b
    assert a == "abc"
    assert list(a) == ["a", "b", "c"]


def test_insert_out_of_range():
    s = StaticString(8, "ab")
    with pytest.raises(IndexError):
        s.insert(3, "x")