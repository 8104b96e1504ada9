from nfaviz.pipeline.stage import PipelineStage
from nfaviz.ir.errors import NFAError
from nfaviz.ir.validation import ValidationResult
from nfaviz.compiler.builder import translate
from nfaviz.compiler.compiler import compile_diagram


class DiagramStage(PipelineStage):
    name = "diagram"

    def run(self, context):
        try:
            context.diagram = translate(context.nfa)
            return ValidationResult.success()
        except NFAError as e:
            context.diagram = None
            return ValidationResult.from_exception(self.name, e)


class RenderStage(PipelineStage):
    name = "render"

    def run(self, context):
        try:
            context.source = compile_diagram(context.diagram, context.output_format)
            return ValidationResult.success()
        except NFAError as e:
            context.source = None
            return ValidationResult.from_exception(self.name, e, object_id=str(context.output_format))
