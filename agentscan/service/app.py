"""FastAPI application exposing agentscan operations."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..orchestrator import AnalyzeOutcome, Orchestrator


class AnalyzeRequest(BaseModel):
    path: str
    dry_run: bool = False


class GeneratedFileModel(BaseModel):
    path: str
    action: str


class AnalyzeResponse(BaseModel):
    dry_run: bool
    total_files: int
    total_dirs: int
    framework: Optional[str] = None
    categories: Dict[str, int]
    files: List[GeneratedFileModel]


class PathRequest(BaseModel):
    path: str


class ReportResponse(BaseModel):
    report: str


class VerifyResponse(BaseModel):
    passed: bool
    successes: List[str]
    warnings: List[str]
    issues: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


async def _run_blocking(func: Callable[[], Any]) -> Any:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing analysis operations."""

    app = FastAPI(title="agentscan", version="1.1.0")

    async def get_orchestrator() -> Orchestrator:
        # A fresh orchestrator per request; runs share no state.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalyzeResponse:
        outcome: AnalyzeOutcome = await _run_blocking(
            lambda: orchestrator.run_analyze(payload.path, dry_run=payload.dry_run)
        )
        profile = outcome.profile
        return AnalyzeResponse(
            dry_run=outcome.dry_run,
            total_files=profile.scan.total_files,
            total_dirs=profile.scan.total_dirs,
            framework=profile.stack.framework,
            categories={label: len(paths) for label, paths in profile.categories.items()},
            files=[
                GeneratedFileModel(path=generated.relative_path, action=generated.action)
                for generated in outcome.files
            ],
        )

    @app.post("/report", response_model=ReportResponse)
    async def report(
        payload: PathRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ReportResponse:
        text = await _run_blocking(lambda: orchestrator.run_report(payload.path))
        return ReportResponse(report=text)

    @app.post("/verify", response_model=VerifyResponse)
    async def verify(
        payload: PathRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> VerifyResponse:
        result = await _run_blocking(lambda: orchestrator.run_verify(payload.path))
        return VerifyResponse(
            passed=result.passed,
            successes=list(result.successes),
            warnings=list(result.warnings),
            issues=list(result.issues),
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
