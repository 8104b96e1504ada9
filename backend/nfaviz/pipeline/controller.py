from typing import Optional

from nfaviz import config
from nfaviz.ir.nfa import NFA
from nfaviz.pipeline.context import PipelineContext
from nfaviz.pipeline.regex_stage import RegexParseStage, NFACompileStage
from nfaviz.pipeline.validation_stage import NFAValidationStage
from nfaviz.pipeline.diagram_stage import DiagramStage, RenderStage


class PipelineController:
    def __init__(self):
        # Only run when starting from a pattern
        self.regex_stages = [
            RegexParseStage(),
            NFACompileStage(),
        ]

        # Core stages (always run)
        self.core_stages = [
            NFAValidationStage(),
            DiagramStage(),
            RenderStage(),
        ]

    def run(
        self,
        pattern: Optional[str] = None,
        nfa: Optional[NFA] = None,
        output_format: Optional[str] = None,
    ) -> PipelineContext:
        if (pattern is None) == (nfa is None):
            raise ValueError("Pass exactly one of pattern or nfa")

        context = PipelineContext(
            pattern=pattern,
            nfa=nfa,
            output_format=output_format or config.DEFAULT_FORMAT,
        )

        stages = list(self.core_stages)
        if pattern is not None:
            stages = self.regex_stages + stages

        for stage in stages:
            result = stage.run(context)

            if config.DEBUG:
                print(f"[PipelineController] {stage.name}: valid={result.is_valid}")
                if stage.name == "compile":
                    print(f"[PipelineController] compiled {context.nfa}")

            # -------------------------------------------------
            # Hard stop on failure
            # -------------------------------------------------
            if not result.is_valid:
                for error in result.errors:
                    context.add_error(error.level, error.message, error.object_id)
                print(f"[PipelineController] Stage '{stage.name}' failed: {len(result.errors)} error(s)")
                break

        return context
