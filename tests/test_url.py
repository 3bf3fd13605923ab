import pytest

from nostrkit.errors import (
    InvalidUrl,
    InvalidUrlHost,
    InvalidUrlMissingAuthority,
    InvalidUrlScheme,
)
from nostrkit.url import RelayUrl, UncheckedUrl, Url


def test_url_case():
    url = Url.try_from_str("Wss://MyRelay.example.COM/PATH?Query")
    assert str(url) == "wss://myrelay.example.com/PATH?Query"


def test_relay_url_slash():
    url = RelayUrl.try_from_str("Wss://MyRelay.example.COM")
    assert str(url) == "wss://myrelay.example.com/"


def test_unchecked_url_str():
    u = UncheckedUrl("/home/user/file.txt")
    assert str(u) == "/home/user/file.txt"
    assert u == UncheckedUrl("/home/user/file.txt")


def test_default_port_removed():
    assert str(Url.try_from_str("wss://relay.example.com:443")) == "wss://relay.example.com/"


def test_non_default_port_kept():
    url = Url.try_from_str("wss://relay.example.com:7777/x")
    assert ":7777" in str(url)


def test_whitespace_trimmed():
    assert Url.try_from_str("  wss://relay.example.com/ ") == Url.try_from_str(
        "wss://relay.example.com/"
    )


def test_normalization_is_idempotent():
    first = Url.try_from_str("HTTP://Example.COM/Avatar.png")
    assert Url.try_from_str(first.value) == first


def test_unchecked_round_trip():
    url = Url.try_from_str("wss://relay.example.com/")
    assert Url.try_from_unchecked_url(url.to_unchecked_url()) == url
    assert url.to_unchecked_url().value == url.value


def test_relay_url_conversions():
    relay = RelayUrl.try_from_unchecked_url(UncheckedUrl("wss://relay.example.com"))
    assert relay.to_url().value == relay.value
    assert relay.to_unchecked_url() == UncheckedUrl(relay.value)
    assert RelayUrl.try_from_url(relay.to_url()) == relay


@pytest.mark.parametrize(
    "text",
    ["wss://localhost:8080", "wss://127.0.0.1", "wss://192.168.1.5/", "wss://[::1]/"],
)
def test_non_global_hosts_rejected(text):
    with pytest.raises(InvalidUrlHost):
        Url.try_from_str(text)


def test_relative_url_rejected():
    with pytest.raises(InvalidUrl):
        Url.try_from_str("relay.example.com")


def test_missing_authority_rejected():
    with pytest.raises(InvalidUrlMissingAuthority):
        Url.try_from_str("mailto:someone@example.com")


def test_empty_host_rejected():
    with pytest.raises(InvalidUrlHost) as info:
        Url.try_from_str("file:///etc/hosts")
    assert info.value.host == ""


def test_bad_port_rejected():
    with pytest.raises(InvalidUrl):
        Url.try_from_str("wss://relay.example.com:99999")


def test_relay_url_requires_websocket_scheme():
    with pytest.raises(InvalidUrlScheme) as info:
        RelayUrl.try_from_str("https://relay.example.com")
    assert info.value.scheme == "https"