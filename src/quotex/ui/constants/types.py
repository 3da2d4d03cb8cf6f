from dataclasses import dataclass


@dataclass(frozen=True)
class ProviderStyle:
    """Display settings for one provider button."""
    label: str
    color: str
