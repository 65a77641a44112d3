from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from .config import SegmentConfig
from .errors import InvalidConfigError
from .notify import PressHandlers
from .segment_render import analyze_segments_with_config

API_SCHEMA_VERSION = 1

# Over HTTP nothing is pressed; segments are serialised with a `tappable` flag only.
_NO_HANDLERS = PressHandlers()


class ApiModel(BaseModel):
    # Backward compatibility: ignore unknown request fields by default.
    model_config = ConfigDict(extra="ignore")


class SegmentsRequest(ApiModel):
    schema_version: int = Field(default=API_SCHEMA_VERSION, ge=1)
    text: str
    config: Optional[dict[str, Any]] = None


class SegmentsResponse(ApiModel):
    schema_version: int
    segments: list[dict[str, Any]]
    n_tokens: int
    n_segments: int
    counts: dict[str, int]


def _ensure_supported_schema_version(v: int) -> None:
    # Backward-compat policy:
    # - missing schema_version -> defaults to current
    # - equal version -> accepted
    # - future version -> explicit client error
    if int(v) > API_SCHEMA_VERSION:
        raise HTTPException(
            status_code=400,
            detail=(
                f"Unsupported schema_version={v}. "
                f"Server supports <= {API_SCHEMA_VERSION}."
            ),
        )


def _config_from_dict(data: Optional[dict[str, Any]]) -> SegmentConfig:
    if not data:
        return SegmentConfig()
    return SegmentConfig.from_dict(data, strict=False)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Tappable Text Kit API",
        version=str(API_SCHEMA_VERSION),
        description="Split text into link/hashtag/mention/prop/emoji segments.",
    )

    @app.get("/healthz")
    def healthz() -> dict[str, object]:
        return {"ok": True, "schema_version": API_SCHEMA_VERSION}

    @app.post("/segments", response_model=SegmentsResponse)
    def segments_endpoint(req: SegmentsRequest) -> SegmentsResponse:
        _ensure_supported_schema_version(req.schema_version)
        try:
            cfg = _config_from_dict(req.config)
            a = analyze_segments_with_config(req.text, config=cfg, handlers=_NO_HANDLERS)
        except InvalidConfigError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        d = a.to_dict()
        return SegmentsResponse(
            schema_version=API_SCHEMA_VERSION,
            segments=d["segments"],  # type: ignore[arg-type]
            n_tokens=a.n_tokens,
            n_segments=a.n_segments,
            counts=dict(a.counts),
        )

    return app


app = create_app()
