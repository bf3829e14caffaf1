"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds graphs from edge sources and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from reachctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from reachctl.commands._sources import EdgeSource
    from reachctl.config.settings import ReachSettings
    from reachctl.domain.generator import EdgeGenerator
    from reachctl.domain.graph import Graph
    from reachctl.services.result import ServiceResult

log = structlog.get_logger("reachctl.commands")


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: ReachSettings) -> None:
        self.settings = settings

        from reachctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from reachctl.services.telemetry import enable_telemetry

            enable_telemetry()

    def make_generator(
        self,
        count: int | None = None,
        letters: int | None = None,
        seed: int | None = None,
    ) -> EdgeGenerator:
        """Random edge generator; unset arguments fall back to the [generate] config."""
        from reachctl.domain.generator import EdgeGenerator

        defaults = self.settings.generate
        return EdgeGenerator(
            defaults.edges if count is None else count,
            defaults.letters if letters is None else letters,
            seed=defaults.seed if seed is None else seed,
        )

    def load_graph(self, source: EdgeSource) -> Graph:
        """Build a graph from file edges, literal edges, then random edges."""
        from reachctl.domain.graph import Graph

        graph = Graph.build(source.file_edges or ())
        graph.add_edges(source.edges)
        if source.wants_random:
            generator = self.make_generator(source.random_count, source.letters, source.seed)
            graph.add_edges(generator)
            log.debug(
                "graph.random_edges",
                count=generator.num_edges,
                letters=generator.num_letters,
                seed=generator.seed,
            )
        log.debug("graph.loaded", vertices=graph.vertex_count, edges=graph.edge_count)
        return graph

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        render = self.settings.render
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            true_char=render.true_char,
            false_char=render.false_char,
            width=render.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
