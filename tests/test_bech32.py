import pytest

from nostrkit.bech32 import Bech32Error, convertbits, decode, encode

NPUB = "npub1sn0wdenkukak0d9dfczzeacvhkrgz92ak56egt7vdgzn8pv2wfqqhrjdv9"
NOTE = "note1fntxtkcy9pjwucqwa9mddn7v03wwwsu9j330jj350nvhpky2tuaspk6nqc"
NPROFILE = (
    "nprofile1qqsrhuxx8l9ex335q7he0f09aej04zpazpl0ne2cgukyawd24mayt8gpp4mhxue69uhhytnc9e3k7mgpz4mhxue69uhkg6nzv9ejuumpv34kytnrdaksjlyr9p"
)


def test_decode_npub_and_reencode():
    hrp, data = decode(NPUB)
    assert hrp == "npub"
    assert len(data) == 32
    assert encode(hrp, data) == NPUB


def test_decode_note():
    hrp, data = decode(NOTE)
    assert hrp == "note"
    assert len(data) == 32
    assert encode("note", data) == NOTE


def test_decode_long_nprofile():
    hrp, data = decode(NPROFILE)
    assert hrp == "nprofile"
    assert data[0] == 0 and data[1] == 32
    assert data[2:34].hex() == "3bf0c63fcb93463407af97a5e5ee64fa883d107ef9e558472c4eb9aaaefa459d"


def test_uppercase_is_accepted():
    assert decode(NPUB.upper()) == decode(NPUB)


def test_mixed_case_rejected():
    with pytest.raises(Bech32Error):
        decode("Npub" + NPUB[4:])


def test_invalid_character_rejected():
    with pytest.raises(Bech32Error):
        decode("note1fntxtkcy9pjwucqwa9mddn7v03wwwsu9j330jj350nvhpky2tuaspk6bqc")


def test_bad_checksum_rejected():
    with pytest.raises(Bech32Error):
        decode(NPUB[:-1])


def test_missing_separator_rejected():
    with pytest.raises(Bech32Error):
        decode("qqqqqqqqqq")


@pytest.mark.parametrize("payload", [b"", b"\x00", b"hello world", bytes(range(64))])
def test_round_trip(payload):
    assert decode(encode("test", payload)) == ("test", payload)


def test_convertbits_round_trip():
    data = list(b"\x01\x02\xfe\xff\x80")
    five = convertbits(data, 8, 5, True)
    assert all(0 <= v < 32 for v in five)
    assert convertbits(five, 5, 8, False) == data


def test_convertbits_bad_padding():
    with pytest.raises(Bech32Error):
        convertbits([1], 5, 8, False)


def test_convertbits_value_out_of_range():
    with pytest.raises(Bech32Error):
        convertbits([32], 5, 8, False)