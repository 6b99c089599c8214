from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swatchgrid import __version__
from swatchgrid.api.v1 import router as v1_router
from swatchgrid.config import config
from swatchgrid.schemas import HealthResponse
from swatchgrid.utils.logging import get_logger

logger = get_logger()

if not config.validate_filter(config.DEFAULT_FILTER):
    raise ValueError(f"Invalid SWATCHGRID_DEFAULT_FILTER: {config.DEFAULT_FILTER}")
if not config.validate_limit(config.PALETTE_LIMIT):
    raise ValueError(f"Invalid SWATCHGRID_PALETTE_LIMIT: {config.PALETTE_LIMIT}")
if not config.validate_chip_size(config.SWATCH_CHIP_SIZE):
    raise ValueError(f"Invalid SWATCHGRID_SWATCH_CHIP_SIZE: {config.SWATCH_CHIP_SIZE}")

app = FastAPI(
    title="SwatchGrid Palette Backend",
    description="Harmony palette generation from a single base color",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"]
)

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health():
    """Service health check."""
    return HealthResponse(ok=True, version=__version__, service=config.SERVICE_NAME)


logger.info("SwatchGrid palette service ready", extra={
    "version": __version__,
    "default_base_color": config.DEFAULT_BASE_COLOR,
    "default_filter": config.DEFAULT_FILTER
})
