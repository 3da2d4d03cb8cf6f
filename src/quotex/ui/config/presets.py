from quotex.generation.providers.factory import PROVIDER_LABELS, Provider
from quotex.ui.constants.types import ProviderStyle

PROVIDER_STYLES = {
    Provider.OPENAI: ProviderStyle(label=PROVIDER_LABELS[Provider.OPENAI], color="#10a37f"),
    Provider.CLAUDE: ProviderStyle(label=PROVIDER_LABELS[Provider.CLAUDE], color="#d97706"),
    Provider.GEMINI: ProviderStyle(label=PROVIDER_LABELS[Provider.GEMINI], color="#4285f4"),
}
