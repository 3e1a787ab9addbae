from symbolicator.report.exceptions import SymbolicationError


class SymbolResolverError(SymbolicationError):
    """Raised when the address-to-symbol process cannot produce usable output."""
