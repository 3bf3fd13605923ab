import pytest

from nostrkit.nostr_url import (
    NostrBech32,
    NostrUrl,
    find_nostr_bech32_pos,
    find_nostr_url_pos,
    urlize,
)
from nostrkit.profile import Profile
from nostrkit.public_key import PublicKey

NPUB = "npub1sn0wdenkukak0d9dfczzeacvhkrgz92ak56egt7vdgzn8pv2wfqqhrjdv9"
NPROFILE = (
    "nprofile1qqsrhuxx8l9ex335q7he0f09aej04zpazpl0ne2cgukyawd24mayt8gpp4mhxue69uhhytnc9e3k7mgpz4mhxue69uhkg6nzv9ejuumpv34kytnrdaksjlyr9p"
)


def test_try_from_string_npub():
    nb = NostrBech32.try_from_string(NPUB)
    assert isinstance(nb.value, PublicKey)
    assert str(nb) == NPUB


def test_try_from_string_nprofile():
    nb = NostrBech32.try_from_string(NPROFILE)
    assert isinstance(nb.value, Profile)
    assert str(nb) == NPROFILE


@pytest.mark.parametrize(
    "text",
    [
        "npub1sn0wdenkukak0d9dfczzeacvhkrgz92ak56egt7vdgzn8pv2wfqqhrjdv",
        "note1fntxtkcy9pjwucqwa9mddn7v03wwwsu9j330jj350nvhpky2tuaspk6bqc",
        "nurl1sn0wdenkukak0d9dfczzeacvhkrgz92ak56egt7vdgzn8pv2wfqqhrjdv9",
    ],
)
def test_try_from_string_rejects(text):
    assert NostrBech32.try_from_string(text) is None


def test_nostr_url_round_trip():
    url = NostrUrl.try_from_string("nostr:" + NPUB)
    assert str(url) == "nostr:" + NPUB
    assert url.bech32 == NostrBech32.try_from_string(NPUB)


def test_nostr_url_requires_prefix():
    assert NostrUrl.try_from_string(NPUB) is None


def test_nostr_url_unicode_issues():
    sample = "🌝🐸note1fntxtkcy9pjwucqwa9mddn7v03wwwsu9j330jj350nvhpky2tuaspk6nqc"
    assert NostrUrl.try_from_string(sample) is None


def test_find_all_bech32_in_order():
    text = f"first {NPROFILE}, then nostr:{NPUB} end"
    found = NostrBech32.find_all_in_string(text)
    assert [str(f) for f in found] == [NPROFILE, NPUB]


def test_find_all_urls_only_prefixed():
    text = f"bare {NPROFILE} and nostr:{NPUB}."
    found = NostrUrl.find_all_in_string(text)
    assert [str(f) for f in found] == ["nostr:" + NPUB]


def test_find_bech32_pos():
    text = "hi " + NPUB + " there"
    start, end = find_nostr_bech32_pos(text)
    assert text[start:end] == NPUB


def test_find_bech32_pos_needs_boundary():
    assert find_nostr_bech32_pos("x" + NPUB) is None


def test_find_url_pos():
    text = "see nostr:" + NPUB
    start, end = find_nostr_url_pos(text)
    assert text[start:end] == "nostr:" + NPUB
    assert find_nostr_url_pos("see " + NPUB) is None


def test_urlize_profile():
    sample = (
        "This is now the offical Gossip Client account.  Please follow it.  "
        "I will be reposting it's messages for some time until it catches on.\n\n"
        "nprofile1qqsrjerj9rhamu30sjnuudk3zxeh3njl852mssqng7z4up9jfj8yupqpzamhxue69uhhyetvv9ujumn0wd68ytnfdenx7tcpz4mhxue69uhkummnw3ezummcw3ezuer9wchszxmhwden5te0dehhxarj9ekkj6m9v35kcem9wghxxmmd9uq3xamnwvaz7tm0venxx6rpd9hzuur4vghsz8nhwden5te0dehhxarj94c82c3wwajkcmr0wfjx2u3wdejhgtcsfx2xk\n\n"
        "#[1]\n"
    )
    fixed = urlize(sample)
    assert "nostr:nprofile1" in fixed


def test_urlize_leaves_existing_prefix():
    sample = (
        "Have you been switching nostr clients lately?\nCould be related to:\n"
        "nostr:note10ttnuuvcs29y3k23gwrcurw2ksvgd7c2rrqlfx7urmt5m963vhss8nja90\n"
    )
    assert urlize(sample) == sample


def test_urlize_adds_prefix():
    sample = (
        "Have you been switching nostr clients lately?\nCould be related to:\n"
        "note10ttnuuvcs29y3k23gwrcurw2ksvgd7c2rrqlfx7urmt5m963vhss8nja90\n"
    )
    fixed = urlize(sample)
    assert "nostr:note1" in fixed
    assert len(fixed) > len(sample)