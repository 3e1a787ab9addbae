from concurrent.futures import ThreadPoolExecutor

from symbolicator.logging.logger import Log
from symbolicator.processor.models import OutcomeStatus, SymbolicationOutcome
from symbolicator.processor.patcher import TextPatcher
from symbolicator.processor.pipeline import PipelineContext, PipelineStep
from symbolicator.report.base_address import BaseAddressResolver
from symbolicator.report.line_selector import LineSelector
from symbolicator.report.models import ProcessInfo, StackFrameCandidate
from symbolicator.report.process_info import ProcessInfoExtractor
from symbolicator.resolver.base import BaseSymbolResolver
from symbolicator.resolver.exceptions import SymbolResolverError
from symbolicator.symbols.base import BaseDebugSymbolProvider

_ADDRESS_PREFIX = "0x"


class ExtractProcessInfoStep(PipelineStep):
    def __init__(self, extractor: ProcessInfoExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.process_info = self._extractor.extract(context.report_text)
        return context


class SelectLinesStep(PipelineStep):
    def __init__(self, selector: LineSelector) -> None:
        self._selector = selector

    def run(self, context: PipelineContext) -> PipelineContext:
        context.candidates = self._selector.select(context.report_text)
        Log.info(f"Found {len(context.candidates)} lines that need symbolication")
        return context


class ResolveSymbolsStep(PipelineStep):
    """Resolves candidates one binary at a time.

    Per binary and run there is one base address lookup, at most one debug
    symbol lookup and one resolver invocation covering all of its addresses.
    """

    def __init__(
        self,
        *,
        base_address_resolver: BaseAddressResolver,
        symbol_provider: BaseDebugSymbolProvider,
        symbol_resolver: BaseSymbolResolver,
        max_workers: int = 1,
    ) -> None:
        self._base_address_resolver = base_address_resolver
        self._symbol_provider = symbol_provider
        self._symbol_resolver = symbol_resolver
        self._max_workers = max(1, max_workers)

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.process_info is None:
            raise ValueError("PipelineContext.process_info must be set before resolving")
        info = context.process_info

        groups: dict[str, list[int]] = {}
        for index, candidate in enumerate(context.candidates):
            groups.setdefault(candidate.binary, []).append(index)

        def resolve_group(binary: str) -> list[SymbolicationOutcome]:
            members = [context.candidates[index] for index in groups[binary]]
            return self._resolve_binary(context.report_text, info, binary, members)

        if self._max_workers > 1 and len(groups) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = {binary: executor.submit(resolve_group, binary) for binary in groups}
                group_outcomes = {binary: future.result() for binary, future in futures.items()}
        else:
            group_outcomes = {binary: resolve_group(binary) for binary in groups}

        by_index: dict[int, SymbolicationOutcome] = {}
        for binary, indexes in groups.items():
            by_index.update(zip(indexes, group_outcomes[binary]))
        context.outcomes = [by_index[index] for index in range(len(context.candidates))]
        return context

    def _resolve_binary(
        self,
        report_text: str,
        info: ProcessInfo,
        binary: str,
        candidates: list[StackFrameCandidate],
    ) -> list[SymbolicationOutcome]:
        base_address = self._base_address_resolver.resolve(report_text, binary)
        if base_address is None:
            return self._failed(
                candidates,
                OutcomeStatus.MISSING_BASE_ADDRESS,
                "missing base address!",
            )

        symbol_path = self._symbol_provider.locate(binary, info.version, info.build)
        if symbol_path is None:
            Log.warning(f"> {binary}: missing DWARF file!")
            return self._failed(candidates, OutcomeStatus.MISSING_SYMBOLS, "missing DWARF file!")

        addresses = list(dict.fromkeys(candidate.address for candidate in candidates))
        try:
            symbols = self._symbol_resolver.resolve(
                base_address, info.architecture, symbol_path, addresses
            )
        except SymbolResolverError as exc:
            Log.error(f"> {binary}: {exc}")
            return self._failed(candidates, OutcomeStatus.RESOLVER_FAILED, str(exc))

        by_address = dict(zip(addresses, symbols))
        outcomes = []
        for candidate in candidates:
            symbol = by_address.get(candidate.address, "").strip()
            # a patched line must not start its trailing column with an address
            if not symbol or symbol.split(None, 1)[0].startswith(_ADDRESS_PREFIX):
                outcomes.append(
                    SymbolicationOutcome(
                        candidate=candidate,
                        status=OutcomeStatus.NO_SYMBOL,
                        reason="no symbol found!",
                    )
                )
            else:
                outcomes.append(
                    SymbolicationOutcome(
                        candidate=candidate,
                        status=OutcomeStatus.RESOLVED,
                        symbol=symbol,
                    )
                )
        return outcomes

    @staticmethod
    def _failed(
        candidates: list[StackFrameCandidate],
        status: OutcomeStatus,
        reason: str,
    ) -> list[SymbolicationOutcome]:
        return [
            SymbolicationOutcome(candidate=candidate, status=status, reason=reason)
            for candidate in candidates
        ]


class PatchTextStep(PipelineStep):
    def __init__(self, patcher: TextPatcher) -> None:
        self._patcher = patcher

    def run(self, context: PipelineContext) -> PipelineContext:
        context.output_text = self._patcher.apply(
            context.report_text, context.candidates, context.outcomes
        )
        return context


class ReportFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(f"Symbolication aborted: {context.error_message}")
        return context
