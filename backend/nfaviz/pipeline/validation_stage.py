from nfaviz.pipeline.stage import PipelineStage
from nfaviz.ir.errors import ValidationError
from nfaviz.ir.validation import ValidationResult
from nfaviz.validation.nfa_validator import validate_nfa


class NFAValidationStage(PipelineStage):
    name = "validate"

    def run(self, context):
        report = validate_nfa(context.nfa)
        context.validation = report

        if report.is_valid:
            return ValidationResult.success()

        return ValidationResult.failure([
            ValidationError(
                level=self.name,
                message=f"[{issue.code}] {issue.message}",
                object_id="" if issue.node_index is None else f"n{issue.node_index}",
            )
            for issue in report.errors
        ])
