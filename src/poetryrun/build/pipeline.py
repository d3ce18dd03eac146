"""
The build phase.

Wires target resolution, process assembly, reload coordination and reporting
into the single linear pipeline run once per build:

    resolve -> assemble -> apply reload -> report

The first error aborts the build; no partial result is ever returned.
"""

import logging
from typing import Mapping, Optional

from ..config.settings import BuildpackSettings, load_settings
from ..models.context import BuildContext
from ..models.results import BuildResult
from ..reload.base import Reloader
from ..system.pyproject import MetadataParser
from .assembler import build_web_process
from .coordinator import ReloadCoordinator
from .reporter import ResultReporter
from .resolver import TargetResolver

logger = logging.getLogger(__name__)


class Builder:
    """
    Computes the launch processes for a Poetry application.

    Args:
        parser: Metadata parser used when no override is set
        reloader: Live reload backend
        settings: Operator settings; read from environ when omitted
        environ: Environment mapping used to load settings, defaults to os.environ
    """

    def __init__(
        self,
        parser: MetadataParser,
        reloader: Reloader,
        settings: Optional[BuildpackSettings] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings if settings is not None else load_settings(environ)
        self.resolver = TargetResolver(parser)
        self.coordinator = ReloadCoordinator(reloader)
        self.reporter = ResultReporter()

    def __call__(self, context: BuildContext) -> BuildResult:
        return self.run(context)

    def run(self, context: BuildContext) -> BuildResult:
        """
        Run the build for one application.

        Args:
            context: Build context supplied by the lifecycle

        Returns:
            BuildResult whose launch metadata holds the processes

        Raises:
            ResolutionError: If the run target cannot be resolved
            ReloadDecisionError: If live reload enablement cannot be decided
        """
        if context.buildpack_info is not None:
            logger.info(f"{context.buildpack_info.name} {context.buildpack_info.version}")

        for entry in context.plan:
            logger.debug(f"Buildpack plan entry: {entry.name} {entry.metadata}")

        target = self.resolver.resolve(self.settings.run_target, context.working_dir)
        process = build_web_process(target.tokens)
        outcome = self.coordinator.apply(process, context.working_dir)
        return self.reporter.report(outcome, target)
