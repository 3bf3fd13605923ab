"""Client-chosen subscription identifiers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubscriptionId:
    """A client-chosen string that names a subscription."""

    value: str

    def __str__(self):
        return self.value