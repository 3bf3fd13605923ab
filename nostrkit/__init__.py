"""Nostr protocol types: keys, Schnorr signatures, bech32 identifiers, URLs, profiles and relay documents."""

__version__ = "0.1.0"