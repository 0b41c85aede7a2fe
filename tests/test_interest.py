import pytest

from pollkit.interest import Interest


def test_is_tests():
    assert Interest.READABLE.is_readable()
    assert not Interest.READABLE.is_writable()
    assert not Interest.WRITABLE.is_readable()
    assert Interest.WRITABLE.is_writable()
    assert not Interest.WRITABLE.is_aio()
    assert not Interest.WRITABLE.is_lio()


def test_bit_or():
    interests = Interest.READABLE | Interest.WRITABLE
    assert interests.is_readable()
    assert interests.is_writable()
    assert interests == Interest.READABLE.add(Interest.WRITABLE)


def test_in_place_or():
    interests = Interest.READABLE
    interests |= Interest.WRITABLE
    assert interests == Interest.READABLE.add(Interest.WRITABLE)


def test_fmt_debug():
    assert repr(Interest.READABLE) == "READABLE"
    assert repr(Interest.WRITABLE) == "WRITABLE"
    assert repr(Interest.READABLE | Interest.WRITABLE) == "READABLE | WRITABLE"
    assert repr(Interest.READABLE.add(Interest.WRITABLE)) == "READABLE | WRITABLE"
    assert repr(Interest.AIO) == "AIO"
    assert repr(Interest.LIO) == "LIO"
    assert repr(Interest.PRIORITY) == "PRIORITY"


def test_add():
    interest = Interest.READABLE.add(Interest.WRITABLE)
    assert interest.is_readable()
    assert interest.is_writable()


def test_remove():
    rw = Interest.READABLE.add(Interest.WRITABLE)
    w = rw.remove(Interest.READABLE)
    assert w is not None
    assert not w.is_readable()
    assert w.is_writable()
    assert w.remove(Interest.WRITABLE) is None
    assert rw.remove(rw) is None


def test_priority_flag():
    interest = Interest.READABLE | Interest.PRIORITY
    assert interest.is_priority()
    assert not Interest.READABLE.is_priority()


def test_equality_and_hash():
    assert Interest.READABLE | Interest.WRITABLE == Interest.WRITABLE | Interest.READABLE
    assert len({Interest.READABLE, Interest.READABLE.add(Interest.READABLE)}) == 1


def test_ordering():
    assert Interest.READABLE < Interest.WRITABLE
    assert Interest.READABLE.add(Interest.WRITABLE) > Interest.WRITABLE
    assert sorted([Interest.WRITABLE, Interest.READABLE]) == [
        Interest.READABLE,
        Interest.WRITABLE,
    ]


def test_empty_interest_rejected():
    with pytest.raises(ValueError):
        Interest(0)