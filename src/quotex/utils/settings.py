from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
root_dir = Path(__file__).parent.parent.parent.parent
env_path = root_dir / ".env"

load_dotenv(dotenv_path=env_path, override=False)


def str_to_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes", "t", "y")


def optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass
class AppConfig:
    """General application configuration."""
    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass
class PromptSettings:
    """Prompt construction configuration."""
    doc_char_limit: int = int(os.getenv("PROMPT_DOC_CHAR_LIMIT", "8000"))
    template_set: str = os.getenv("PROMPT_TEMPLATE_SET", "client")


@dataclass
class OpenAIConfig:
    """OpenAI chat completions configuration."""
    base_url: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com")
    model: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    max_tokens: int = int(os.getenv("OPENAI_MAX_TOKENS", "4000"))


@dataclass
class ClaudeConfig:
    """Anthropic messages API configuration."""
    base_url: str = os.getenv("CLAUDE_BASE_URL", "https://api.anthropic.com")
    model: str = os.getenv("CLAUDE_MODEL", "claude-sonnet-4-20250514")
    max_tokens: int = int(os.getenv("CLAUDE_MAX_TOKENS", "4000"))
    anthropic_version: str = os.getenv("ANTHROPIC_VERSION", "2023-06-01")


@dataclass
class GeminiConfig:
    """Google generateContent configuration."""
    base_url: str = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com")
    model: str = os.getenv("GEMINI_MODEL", "gemini-1.5-pro")
    max_tokens: int = int(os.getenv("GEMINI_MAX_TOKENS", "4000"))


@dataclass
class HTTPConfig:
    """Outbound HTTP configuration. No timeout unless PROVIDER_TIMEOUT_S is set."""
    timeout_s: Optional[float] = optional_float(os.getenv("PROVIDER_TIMEOUT_S"))


@dataclass
class RelayConfig:
    """Server-side relay configuration (server-held OpenAI credential)."""
    api_key: str = os.getenv("RELAY_OPENAI_API_KEY") or os.getenv("OPENAI_API_KEY", "")
    model: str = os.getenv("RELAY_MODEL", "gpt-4o")
    max_tokens: int = int(os.getenv("RELAY_MAX_TOKENS", "2000"))
    doc_char_limit: int = int(os.getenv("RELAY_DOC_CHAR_LIMIT", "15000"))


@dataclass
class APIConfig:
    """API server configuration."""
    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8787"))
    reload: bool = str_to_bool(os.getenv("API_RELOAD", "false"))


@dataclass
class UIConfig:
    """Streamlit UI defaults."""
    default_provider: str = os.getenv("UI_DEFAULT_PROVIDER", "openai")
    strict_default: bool = str_to_bool(os.getenv("UI_STRICT_DEFAULT", "true"))


@dataclass
class Settings:
    """Main settings object containing all configuration sections."""
    app: AppConfig
    prompt: PromptSettings
    openai: OpenAIConfig
    claude: ClaudeConfig
    gemini: GeminiConfig
    http: HTTPConfig
    relay: RelayConfig
    api: APIConfig
    ui: UIConfig

    @classmethod
    def load(cls) -> Settings:
        """Load settings from environment variables."""
        return cls(
            app=AppConfig(),
            prompt=PromptSettings(),
            openai=OpenAIConfig(),
            claude=ClaudeConfig(),
            gemini=GeminiConfig(),
            http=HTTPConfig(),
            relay=RelayConfig(),
            api=APIConfig(),
            ui=UIConfig(),
        )


settings = Settings.load()


if __name__ == "__main__":
    print("=== Settings Debug ===")
    print(f"Root dir: {root_dir}")
    print(f".env path: {env_path}")
    print(f".env exists: {env_path.exists()}")
    print(f"\nOpenAI: {settings.openai.base_url} ({settings.openai.model})")
    print(f"Claude: {settings.claude.base_url} ({settings.claude.model})")
    print(f"Gemini: {settings.gemini.base_url} ({settings.gemini.model})")
    print(f"Relay key configured: {bool(settings.relay.api_key)}")
