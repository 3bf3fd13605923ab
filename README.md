# nostrkit

Plain-Python building blocks for the nostr protocol. No third-party
dependencies: bech32 and BIP-340 Schnorr signatures over secp256k1 are
implemented in the package itself.

## Modules

- `nostrkit.errors` – every failure raises a subclass of `NostrError`
  (itself a `ValueError`): `InvalidPublicKey`, `InvalidPublicKeyPrefix`,
  `InvalidSignature`, `InvalidProfile`, `WrongBech32`, `InvalidUrl` and its
  subclasses `InvalidUrlHost`, `InvalidUrlScheme`,
  `InvalidUrlMissingAuthority`.
- `nostrkit.bech32` – `encode(hrp, data)`, `decode(s)` (returns the prefix
  and payload bytes) and `convertbits(...)`; errors raise `Bech32Error`.
- `nostrkit.secp` – `xonly_public_key`, `schnorr_sign`, `schnorr_verify`,
  `lift_x` and `is_valid_xonly`.
- `nostrkit.public_key` – `PublicKey` (32-byte x-only key, validated as a
  curve point; hex, `npub` bech32, JSON and `verify`), `PublicKeyHex`
  (64-character hex string, with `prefix(chars)`) and `PublicKeyHexPrefix`
  (with `matches(pubkey_hex)`).
- `nostrkit.signature` – `Signature` (64 bytes, hex and JSON) and
  `SignatureHex`.
- `nostrkit.profile` – `Profile`, a public key plus relay URLs, encoded as
  an `nprofile` bech32 string or as JSON.
- `nostrkit.nostr_url` – `NostrBech32`, `NostrUrl`, `urlize`,
  `find_nostr_bech32_pos` and `find_nostr_url_pos` for working with
  identifiers embedded in text.
- `nostrkit.url` – `UncheckedUrl`, `Url` (normalised, with an authority and
  a public Internet host; `localhost` and non-global IP addresses are
  refused) and `RelayUrl` (`ws` or `wss` scheme only).
- `nostrkit.unixtime` – `Unixtime`, whole seconds since the epoch, with
  `now()` and arithmetic against `datetime.timedelta`.
- `nostrkit.subscription_id` – `SubscriptionId`.
- `nostrkit.relay_list` – `SimpleRelayUsage` and `SimpleRelayList`.
- `nostrkit.pay_request_data` – `PayRequestData`, a zapper lnurl response.
- `nostrkit.relay_information_document` – `RelayInformationDocument` and
  `RelayLimitation`.

## Installation

```
pip install nostrkit
```

## Examples

Keys and profiles:

```python
from nostrkit.public_key import PublicKey
from nostrkit.profile import Profile
from nostrkit.url import UncheckedUrl, RelayUrl

pk = PublicKey.try_from_hex_string(
    "3bf0c63fcb93463407af97a5e5ee64fa883d107ef9e558472c4eb9aaaefa459d"
)
profile = Profile(pk, [UncheckedUrl("wss://r.x.com"), UncheckedUrl("wss://djbas.sadkb.com")])
encoded = profile.as_bech32_string()          # "nprofile1..."
assert Profile.try_from_bech32_string(encoded) == profile

RelayUrl.try_from_str("Wss://MyRelay.example.COM")   # RelayUrl("wss://myrelay.example.com/")
```

Signing and verifying:

```python
import os
from nostrkit.secp import schnorr_sign, xonly_public_key
from nostrkit.public_key import PublicKey
from nostrkit.signature import Signature

seckey = os.urandom(32)
pk = PublicKey(xonly_public_key(seckey))
sig = Signature.from_bytes(schnorr_sign(b"hello", seckey))
pk.verify(b"hello", sig)      # raises InvalidSignature if it does not verify
```

Identifiers in text:

```python
from nostrkit.nostr_url import urlize

urlize("see note10ttnuuvcs29y3k23gwrcurw2ksvgd7c2rrqlfx7urmt5m963vhss8nja90")
# "see nostr:note10ttnuuvcs29y3k23gwrcurw2ksvgd7c2rrqlfx7urmt5m963vhss8nja90"
```

Relay information documents round-trip through JSON and keep unknown
fields (known fields first, the others sorted by key):

```python
from nostrkit.relay_information_document import RelayInformationDocument

rid = RelayInformationDocument.loads('{"name": "A Relay", "supported_nips": [11, 12]}')
rid.supports_nip(11)   # True
print(rid.dumps())
```

## What it does not do

- `urlize`, `find_nostr_bech32_pos` and `find_nostr_url_pos` recognise
  `npub`, `nprofile`, `note` and `nevent` sequences, but `NostrBech32` and
  `NostrUrl` only decode `npub` (to a `PublicKey`) and `nprofile` (to a
  `Profile`); `note` and `nevent` strings give `None`, and
  `find_all_in_string` skips them.
- There are no event, tag or relay-message types, and no event ids.
- There is no network code: no relay client, no websocket connection and
  no HTTP requests for relay documents or lnurl endpoints.
- There is no private-key type; `nostrkit.secp` works on raw 32-byte
  secret keys.

## Running the tests

```
pip install -e ".[test]"
pytest
```