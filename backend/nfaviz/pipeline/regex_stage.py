from nfaviz.pipeline.stage import PipelineStage
from nfaviz.ir.validation import ValidationResult
from nfaviz.ir.errors import RegexParseError, ValidationError
from nfaviz.regex.parser import parse_regex
from nfaviz.regex.compiler import compile_ast


class RegexParseStage(PipelineStage):
    name = "parse"

    def run(self, context):
        if context.pattern is None:
            return ValidationResult.failure(
                [ValidationError(level=self.name, message="No pattern supplied", object_id="")]
            )

        try:
            context.ast = parse_regex(context.pattern)
            return ValidationResult.success()
        except RegexParseError as e:
            context.ast = None
            return ValidationResult.from_exception(self.name, e, object_id=context.pattern)


class NFACompileStage(PipelineStage):
    name = "compile"

    def run(self, context):
        try:
            context.nfa = compile_ast(context.ast)
            return ValidationResult.success()
        except RegexParseError as e:
            context.nfa = None
            return ValidationResult.from_exception(self.name, e, object_id=context.pattern)
