"""
SwatchGrid v1 API Routes
Palette, scheme, parse, contrast and export endpoints over the harmony engine.
"""
import time
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from swatchgrid.config import config
from swatchgrid.schemas import (
    BaseColorModel, ContrastResponse, HarmonyColorModel, HSLModel, MetricsResponse,
    PaletteResponse, ParseResponse, RandomColorResponse, SchemeSetResponse,
    SwatchItemModel, SwatchMeta
)
from swatchgrid.services.colors.contrast import ideal_text_color, yiq_luma
from swatchgrid.services.colors.conversions import rgb_to_hex, rgb_to_hsl
from swatchgrid.services.colors.harmony import SCHEME_ORDER, SchemeSet, generate_schemes_from_hsl
from swatchgrid.services.colors.harmony.swatches import (
    create_swatch_metadata, render_frame_swatch, render_scheme_swatch
)
from swatchgrid.services.colors.parsing import parse_color_tagged
from swatchgrid.services.export import css_variables_block, hex_list, palette_hexes
from swatchgrid.services.session import PALETTE_FILTERS, build_frame, random_hex
from swatchgrid.utils.ids import generate_request_id
from swatchgrid.utils.logging import get_logger
from swatchgrid.utils.metrics import get_metrics

logger = get_logger()
router = APIRouter(prefix="/v1", tags=["Palette"])

FILTER_PATTERN = "^(" + "|".join(PALETTE_FILTERS) + ")$"


def _record(route: str, fmt: Optional[str] = None, palette_filter: Optional[str] = None):
    if not config.METRICS_ENABLED:
        return
    metrics = get_metrics()
    metrics.increment_request_count(route)
    if fmt is not None:
        metrics.increment_parse_format(fmt)
    if palette_filter is not None:
        metrics.increment_filter_count(palette_filter)


def _record_failure(error_type: str):
    if config.METRICS_ENABLED:
        get_metrics().increment_failure_count(error_type)


def _resolve_schemes(base: Optional[str]):
    """Parse base text (or the configured default) and generate its schemes."""
    base_text = (base or "").strip() or config.DEFAULT_BASE_COLOR
    fmt, rgb = parse_color_tagged(base_text)
    if fmt == "fallback":
        logger.warning("Base color not recognized, using fallback", extra={"base": base_text[:64]})
    return fmt, generate_schemes_from_hsl(rgb_to_hsl(rgb))


def _harmony_models(colors) -> list:
    return [
        HarmonyColorModel(
            hex=c.hex,
            hsl=HSLModel(h=c.hsl.h, s=c.hsl.s, l=c.hsl.l),
            category=c.category,
            var_name=c.var_name
        )
        for c in colors
    ]


def scheme_set_response(
    schemes: SchemeSet,
    input_format: str,
    request_id: str,
    swatch_png_b64: Optional[str] = None
) -> SchemeSetResponse:
    """Convert a SchemeSet into its API model."""
    base = schemes.base
    payload = {
        category.value: _harmony_models(schemes.colors_for(category))
        for category in SCHEME_ORDER
    }
    return SchemeSetResponse(
        base=BaseColorModel(hex=base.hex, h=base.h, s=base.s, l=base.l),
        input_format=input_format,
        swatch_png_b64=swatch_png_b64,
        request_id=request_id,
        **payload
    )


@router.get("/schemes", response_model=SchemeSetResponse,
            summary="Harmony Schemes",
            description="Generate all six harmony schemes for a base color")
async def get_schemes(
    base: Optional[str] = Query(None, max_length=128, description="Base color: hex, rgb(), rgba(), hsl() or hsla()"),
    include_swatch: bool = Query(False, description="Include a labeled PNG swatch of every scheme")
) -> SchemeSetResponse:
    request_id = generate_request_id()
    try:
        fmt, schemes = _resolve_schemes(base)
        _record("schemes", fmt=fmt)
        logger.info(f"Schemes request {request_id} completed", extra={
            "request_id": request_id,
            "base_hex": schemes.base.hex,
            "input_format": fmt
        })
        swatch_b64 = None
        if include_swatch:
            try:
                swatch_b64 = render_scheme_swatch(schemes, config.SWATCH_CHIP_SIZE, config.SWATCH_SPACING)
            except (OSError, ValueError) as e:
                logger.warning(f"Swatch rendering failed for {request_id}: {e}", extra={"request_id": request_id})
                _record_failure("swatch")
        return scheme_set_response(schemes, fmt, request_id, swatch_b64)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Schemes request {request_id} failed: {e}", extra={"request_id": request_id})
        _record_failure("schemes")
        raise HTTPException(status_code=500, detail="Scheme generation failed")


@router.get("/palette", response_model=PaletteResponse,
            summary="Rendered Palette",
            description="Lay out the swatch grid for one category filter, base color first")
async def get_palette(
    base: Optional[str] = Query(None, max_length=128, description="Base color text"),
    filter: str = Query(config.DEFAULT_FILTER, pattern=FILTER_PATTERN, description="Harmony category or 'all'"),
    include_swatch: bool = Query(False, description="Include a PNG swatch strip"),
    chip_size: int = Query(config.SWATCH_CHIP_SIZE, ge=8, le=256, description="Swatch chip size in pixels")
) -> PaletteResponse:
    request_id = generate_request_id()
    start_time = time.time()
    
    try:
        fmt, schemes = _resolve_schemes(base)
        frame = build_frame(schemes, filter, config.PALETTE_LIMIT)
        _record("palette", fmt=fmt, palette_filter=filter)
        
        swatch_b64 = None
        swatch_meta = None
        if include_swatch:
            try:
                swatch_b64 = render_frame_swatch(frame, chip_size, config.SWATCH_SPACING)
                swatch_meta = SwatchMeta(**create_swatch_metadata(frame.hexes, chip_size, config.SWATCH_SPACING))
            except (OSError, ValueError) as e:
                logger.warning(f"Swatch rendering failed for {request_id}: {e}", extra={"request_id": request_id})
                _record_failure("swatch")
        
        processing_time_ms = (time.time() - start_time) * 1000
        if config.METRICS_ENABLED:
            get_metrics().record_timing("palette", processing_time_ms)
        
        logger.info(f"Palette request {request_id} completed", extra={
            "request_id": request_id,
            "base_hex": frame.base_hex,
            "filter": filter,
            "items": len(frame.items),
            "processing_time_ms": round(processing_time_ms, 2)
        })
        
        return PaletteResponse(
            base_hex=frame.base_hex,
            filter=frame.filter,
            items=[SwatchItemModel(**asdict(item)) for item in frame.items],
            strip=list(frame.strip),
            tab_background=frame.tab_background,
            tab_color=frame.tab_color,
            swatch_png_b64=swatch_b64,
            swatch_meta=swatch_meta,
            request_id=request_id,
            processing_time_ms=processing_time_ms
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Palette request {request_id} failed: {e}", extra={"request_id": request_id})
        _record_failure("palette")
        raise HTTPException(status_code=500, detail="Palette generation failed")


@router.get("/palette/css", response_class=PlainTextResponse,
            summary="CSS Variables Export")
async def export_css(
    base: Optional[str] = Query(None, max_length=128),
    filter: str = Query(config.DEFAULT_FILTER, pattern=FILTER_PATTERN)
) -> str:
    _, schemes = _resolve_schemes(base)
    _record("palette_css", palette_filter=filter)
    hexes = palette_hexes(schemes, filter, config.PALETTE_LIMIT)
    return css_variables_block(hexes, config.PALETTE_LIMIT)


@router.get("/palette/hexes", response_class=PlainTextResponse,
            summary="Hex List Export")
async def export_hexes(
    base: Optional[str] = Query(None, max_length=128),
    filter: str = Query(config.DEFAULT_FILTER, pattern=FILTER_PATTERN)
) -> str:
    _, schemes = _resolve_schemes(base)
    _record("palette_hexes", palette_filter=filter)
    return hex_list(palette_hexes(schemes, filter, config.PALETTE_LIMIT), config.PALETTE_LIMIT)


@router.get("/parse", response_model=ParseResponse,
            summary="Parse Color Text")
async def parse(
    color: str = Query(..., max_length=128, description="Color text to parse")
) -> ParseResponse:
    fmt, rgb = parse_color_tagged(color)
    _record("parse", fmt=fmt)
    h, s, l = rgb_to_hsl(rgb)
    return ParseResponse(
        input=color,
        format=fmt,
        rgb=list(rgb),
        hex=rgb_to_hex(rgb),
        hsl=HSLModel(h=h, s=s, l=l)
    )


@router.get("/contrast", response_model=ContrastResponse,
            summary="Readable Text Color")
async def contrast(
    color: str = Query(..., max_length=128, description="Background color text")
) -> ContrastResponse:
    fmt, rgb = parse_color_tagged(color)
    _record("contrast", fmt=fmt)
    return ContrastResponse(
        color=color,
        luma=yiq_luma(*rgb),
        text_color=ideal_text_color(color)
    )


@router.get("/random", response_model=RandomColorResponse,
            summary="Random Base Color")
async def random_color() -> RandomColorResponse:
    _record("random")
    return RandomColorResponse(hex=random_hex())


@router.get("/metrics", response_model=MetricsResponse,
            summary="Service Metrics")
async def metrics() -> MetricsResponse:
    return MetricsResponse(**get_metrics().get_summary())
