"""Simple relay lists: which relays to read from and write to."""

import json
from dataclasses import dataclass, field

from .errors import NostrError
from .url import UncheckedUrl


@dataclass(frozen=True)
class SimpleRelayUsage:
    """Whether to write to and read from a relay."""

    write: bool = False
    read: bool = True

    def to_json(self):
        return {"write": self.write, "read": self.read}

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, dict):
            raise NostrError("relay usage must be a JSON object")
        try:
            write, read = value["write"], value["read"]
        except KeyError as exc:
            raise NostrError(f"relay usage missing field {exc.args[0]!r}") from exc
        if not isinstance(write, bool) or not isinstance(read, bool):
            raise NostrError("relay usage fields must be booleans")
        return cls(write=write, read=read)


@dataclass
class SimpleRelayList:
    """A mapping from relay URL to how that relay is used."""

    relays: dict = field(default_factory=dict)

    def to_json(self):
        return {url.value: usage.to_json() for url, usage in self.relays.items()}

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, dict):
            raise NostrError("A JSON object was expected")
        return cls({UncheckedUrl(k): SimpleRelayUsage.from_json(v) for k, v in value.items()})

    def dumps(self):
        return json.dumps(self.to_json(), separators=(",", ":"))

    @classmethod
    def loads(cls, text):
        return cls.from_json(json.loads(text))