from symbolicator.config.settings import Settings
from symbolicator.logging.logger import Log
from symbolicator.processor.models import SymbolicationResult
from symbolicator.processor.patcher import TextPatcher
from symbolicator.processor.pipeline import PipelineContext, PipelineStep
from symbolicator.processor.steps import (
    ExtractProcessInfoStep,
    PatchTextStep,
    ReportFailureStep,
    ResolveSymbolsStep,
    SelectLinesStep,
)
from symbolicator.report.base_address import BaseAddressResolver
from symbolicator.report.exceptions import SymbolicationError
from symbolicator.report.line_selector import LineSelector
from symbolicator.report.process_info import ProcessInfoExtractor
from symbolicator.resolver.atos_adapter import AtosSymbolResolver
from symbolicator.resolver.base import BaseSymbolResolver
from symbolicator.symbols.base import BaseDebugSymbolProvider
from symbolicator.symbols.factory import SymbolProviderFactory


class Processor:
    """Runs the symbolication pipeline over one crash report.

    Pipeline: extract header -> select lines -> resolve per binary -> patch text.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        failed_step: PipelineStep | None = None,
    ) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, report_text: str) -> SymbolicationResult:
        """Symbolicate a report.

        Raises:
            MissingFieldError: if the report header lacks a mandatory field.
        """
        context = PipelineContext(report_text=report_text)
        try:
            for step in self._steps:
                context = step.run(context)
        except SymbolicationError as exc:
            context.error_message = str(exc)
            if self._failed_step is not None:
                self._failed_step.run(context)
            raise

        result = SymbolicationResult(text=context.output_text, outcomes=context.outcomes)
        Log.info(
            f"Symbolicated {result.resolved} of {result.attempted} frames "
            f"({result.failed} unresolved)"
        )
        return result


def build_processor(
    settings: Settings,
    symbol_provider: BaseDebugSymbolProvider | None = None,
    symbol_resolver: BaseSymbolResolver | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if symbol_provider is None:
        symbol_provider = SymbolProviderFactory.create(settings)
    if symbol_resolver is None:
        symbol_resolver = AtosSymbolResolver(
            executable=settings.resolver_executable,
            tool=settings.resolver_tool,
            timeout_seconds=settings.resolver_timeout_seconds,
            verbose=settings.verbose,
        )
    steps: list[PipelineStep] = [
        ExtractProcessInfoStep(ProcessInfoExtractor()),
        SelectLinesStep(LineSelector()),
        ResolveSymbolsStep(
            base_address_resolver=BaseAddressResolver(),
            symbol_provider=symbol_provider,
            symbol_resolver=symbol_resolver,
            max_workers=settings.resolver_max_workers,
        ),
        PatchTextStep(TextPatcher(verbose=settings.verbose)),
    ]
    return Processor(steps=steps, failed_step=ReportFailureStep())
