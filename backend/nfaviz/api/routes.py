from fastapi import APIRouter
from fastapi.responses import JSONResponse

from nfaviz import config
from nfaviz.schemas import (
    CompileRequest,
    CompileResponse,
    VisualizeRequest,
    VisualizeResponse,
    FormatsResponse,
)
from nfaviz.api.serializers import serialize_ir, serialize_errors
from nfaviz.compiler.compiler import available_formats
from nfaviz.ir.errors import NFADocumentError
from nfaviz.ir.loader import nfa_from_spec, nfa_to_dict
from nfaviz.pipeline.context import PipelineContext
from nfaviz.pipeline.controller import PipelineController

router = APIRouter()


def _error_response(context: PipelineContext) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "status": "error",
            "errors": serialize_errors(context.errors),
            "validation": context.validation.to_dict() if context.validation else None,
        },
    )


def _success_payload(context: PipelineContext) -> dict:
    return {
        "status": "warning" if context.validation and context.validation.issues else "success",
        "diagram": {
            "type": context.output_format,
            "source": context.source,
        },
        "ir": serialize_ir(context.diagram),
        "validation": context.validation.to_dict(),
    }


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/formats", response_model=FormatsResponse)
def formats():
    return {"formats": available_formats(), "default": config.DEFAULT_FORMAT}


@router.post("/compile", response_model=CompileResponse)
def compile_pattern(request: CompileRequest):
    context = PipelineController().run(
        pattern=request.pattern,
        output_format=request.output_format,
    )
    if not context.succeeded:
        return _error_response(context)

    payload = _success_payload(context)
    payload["nfa"] = nfa_to_dict(context.nfa)
    return payload


@router.post("/visualize", response_model=VisualizeResponse)
def visualize(request: VisualizeRequest):
    try:
        nfa = nfa_from_spec(request.nfa)
    except NFADocumentError as e:
        return JSONResponse(
            status_code=422,
            content={"status": "error", "errors": [{"level": "document", "message": str(e)}]},
        )

    context = PipelineController().run(nfa=nfa, output_format=request.output_format)
    if not context.succeeded:
        return _error_response(context)

    return _success_payload(context)
