"""Coding assistant endpoints."""

from fastapi import APIRouter, Depends

from api.deps import gateway_dependency, with_timeout
from models.request import CodeRequest, CodeResponse, ConvertRequest, DebugRequest
from services.model_gateway import ModelGateway
from skills.code_skill import analyze_complexity, convert_code, debug_code, explain_code

router = APIRouter(prefix="/api/code", tags=["code"])


@router.post("/explain", response_model=CodeResponse)
async def explain(req: CodeRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    return CodeResponse(result=await with_timeout(explain_code(req.code, req.language, gateway)))


@router.post("/debug", response_model=CodeResponse)
async def debug(req: DebugRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    result = await with_timeout(debug_code(req.code, req.language, req.error, gateway))
    return CodeResponse(result=result)


@router.post("/convert", response_model=CodeResponse)
async def convert(req: ConvertRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    result = await with_timeout(
        convert_code(req.code, req.from_language, req.to_language, gateway)
    )
    return CodeResponse(result=result)


@router.post("/complexity", response_model=CodeResponse)
async def complexity(req: CodeRequest, gateway: ModelGateway = Depends(gateway_dependency)):
    result = await with_timeout(analyze_complexity(req.code, req.language, gateway))
    return CodeResponse(result=result)
