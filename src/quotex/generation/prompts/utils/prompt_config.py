from dataclasses import dataclass


@dataclass
class PromptConfig:
    """Configuration for prompt building."""
    strict_quotes_only: bool = True
    doc_char_limit: int = 8000
    template_set: str = "client"  # "client", "relay"
