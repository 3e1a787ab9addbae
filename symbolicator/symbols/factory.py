from symbolicator.config.settings import Settings
from symbolicator.symbols.archive_provider import ArchiveSymbolProvider
from symbolicator.symbols.base import BaseDebugSymbolProvider
from symbolicator.symbols.directory_provider import DirectorySymbolProvider


class SymbolProviderFactory:
    """Creates the debug-symbol provider selected in settings."""

    PROVIDERS: dict[str, type[ArchiveSymbolProvider] | type[DirectorySymbolProvider]] = {
        "archive": ArchiveSymbolProvider,
        "directory": DirectorySymbolProvider,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDebugSymbolProvider:
        name = settings.symbol_provider.lower()
        provider_cls = cls.PROVIDERS.get(name)
        if provider_cls is None:
            raise ValueError(
                f"Unknown symbol provider '{name}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return provider_cls(settings.symbols_root)
