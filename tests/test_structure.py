import pytest

from torro.bencode.structure import BencodeDict, BencodeInt, BencodeList, BencodeString


def test_dict_keys_are_kept_sorted():
    d = BencodeDict({b"zeta": BencodeInt(1), b"alpha": BencodeInt(2), b"Mid": BencodeInt(3)})
    assert list(d.keys()) == [b"Mid", b"alpha", b"zeta"]
    assert repr(d).startswith("BencodeDict({b'Mid'")


def test_dict_is_read_only():
    d = BencodeDict({b"a": BencodeInt(1)})
    with pytest.raises(TypeError):
        d.value[b"b"] = BencodeInt(2)


def test_constructor_type_checks():
    with pytest.raises(TypeError):
        BencodeInt("1")
    with pytest.raises(TypeError):
        BencodeInt(True)
    with pytest.raises(TypeError):
        BencodeString("text")
    with pytest.raises(TypeError):
        BencodeList([1, 2])
    with pytest.raises(TypeError):
        BencodeDict({"a": BencodeInt(1)})
    with pytest.raises(TypeError):
        BencodeDict({b"a": 1})


def test_int_range():
    assert BencodeInt(2**63 - 1).value == 2**63 - 1
    assert BencodeInt(-(2**63)).value == -(2**63)
    with pytest.raises(ValueError):
        BencodeInt(2**63)


def test_equality_is_per_variant():
    assert BencodeInt(1) == BencodeInt(1)
    assert BencodeInt(1) != BencodeInt(2)
    assert BencodeString(b"1") != BencodeInt(1)
    assert BencodeList([BencodeInt(1)]) == BencodeList((BencodeInt(1),))
    assert BencodeDict({b"b": BencodeInt(1), b"a": BencodeInt(2)}) == \
        BencodeDict({b"a": BencodeInt(2), b"b": BencodeInt(1)})


def test_accessors():
    assert BencodeInt(5).int() == 5
    assert BencodeInt(5).bytestring() is None
    assert BencodeString(b"x").bytestring() == b"x"
    assert BencodeString(b"x").list() is None
    assert BencodeList([]).list() == ()
    assert BencodeDict({}).dict() == {}
    assert BencodeDict({}).int() is None
