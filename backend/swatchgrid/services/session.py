"""
SwatchGrid Render Session

Owns the state a swatch-grid view needs between events (base color text,
active category filter, last generated schemes) and performs one full
recomputation per event. Rendering is delegated to a Presenter; the engine
never calls back into presentation code beyond Presenter.present().

Also provides the demo auto-advance loop that cycles category filters until
the first user interaction.
"""

import asyncio
import random
import time
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, Tuple

from swatchgrid.config import config
from swatchgrid.services.colors.contrast import LIGHT_TEXT, DARK_TEXT, ideal_text_color
from swatchgrid.services.colors.harmony import Category, SchemeSet, generate_schemes
from swatchgrid.services.colors.harmony.dedup import flatten_unique
from swatchgrid.services.export import (
    ALL_FILTER, css_var_name, css_variables_block, hex_list, palette_hexes
)
from swatchgrid.utils.logging import get_logger
from swatchgrid.utils.metrics import get_metrics

logger = get_logger()

# Tab order of the category filters; the first entry is the initial view
PALETTE_FILTERS: Tuple[str, ...] = (
    Category.SPLIT.value,
    Category.COMPLEMENTARY.value,
    Category.ANALOGOUS.value,
    Category.TRIADIC.value,
    Category.QUADRATIC.value,
    Category.MONOCHROME.value,
    ALL_FILTER,
)

# Interaction kinds that end the demo
DEMO_CANCEL_EVENTS = frozenset({"click", "keydown", "touchstart", "pointerdown"})

BASE_VAR_NAME = "--color-base"


def validate_filter(palette_filter: str) -> str:
    """
    Check a category filter name.
    
    Raises:
        ValueError: If palette_filter is not a harmony category or "all"
    """
    if palette_filter not in PALETTE_FILTERS:
        raise ValueError(f"Unknown palette filter: {palette_filter}")
    return palette_filter


def random_hex(rng: Optional[random.Random] = None) -> str:
    """Uniformly random "#RRGGBB" over the full 24-bit range."""
    rng = rng or random
    return f"#{rng.randint(0, 0xFFFFFF):06X}"


@dataclass(frozen=True)
class SwatchItem:
    """One rendered swatch with the styling hints the presenter needs."""
    hex: str
    category: str
    var_name: str
    text_color: str
    button_background: str
    button_color: str


@dataclass(frozen=True)
class RenderFrame:
    """Everything a presenter needs to draw one state of the grid."""
    base_hex: str
    filter: str
    items: Tuple[SwatchItem, ...]
    strip: Tuple[str, ...]  # first and last swatch colors
    tab_background: str
    tab_color: str
    
    @property
    def hexes(self):
        return [item.hex for item in self.items]


class Presenter(Protocol):
    """Rendering collaborator. Receives each frame after recomputation."""
    
    def present(self, frame: RenderFrame) -> None:
        ...


def swatch_item(hex_value: str, category: str, var_name: str) -> SwatchItem:
    """Build a SwatchItem, choosing text and copy-button colors by contrast."""
    text_color = ideal_text_color(hex_value)
    on_dark = text_color == LIGHT_TEXT
    return SwatchItem(
        hex=hex_value,
        category=category,
        var_name=var_name,
        text_color=text_color,
        button_background="rgba(0,0,0,0.22)" if on_dark else "rgba(255,255,255,0.4)",
        button_color="#fff" if on_dark else DARK_TEXT,
    )


def build_frame(schemes: SchemeSet, palette_filter: str, limit: Optional[int] = None) -> RenderFrame:
    """
    Lay out the swatches for one filter.
    
    The base swatch comes first as --color-base; the filter's colors (or the
    de-duplicated palette for "all") follow as --color-01, --color-02, ...
    
    Args:
        schemes: Generated scheme set
        palette_filter: Harmony category name or "all"
        limit: Maximum swatches including the base; defaults to config.PALETTE_LIMIT
        
    Returns:
        RenderFrame for the presenter
    """
    validate_filter(palette_filter)
    limit = config.PALETTE_LIMIT if limit is None else limit
    
    if palette_filter == ALL_FILTER:
        colors = flatten_unique(schemes, limit)
    else:
        colors = schemes.colors_for(palette_filter)
    
    items = [swatch_item(schemes.base.hex, Category.BASE.value, BASE_VAR_NAME)]
    items.extend(
        swatch_item(color.hex, color.category, css_var_name(i + 1))
        for i, color in enumerate(colors)
    )
    items = items[:limit]
    
    strip = (items[0].hex, items[-1].hex) if items else ()
    return RenderFrame(
        base_hex=schemes.base.hex,
        filter=palette_filter,
        items=tuple(items),
        strip=strip,
        tab_background=schemes.base.hex,
        tab_color=ideal_text_color(schemes.base.hex),
    )


@dataclass
class RenderSession:
    """Mutable view state, replaced field by field on each event."""
    base_text: str = field(default_factory=lambda: config.DEFAULT_BASE_COLOR)
    filter: str = field(default_factory=lambda: config.DEFAULT_FILTER)
    schemes: Optional[SchemeSet] = None
    frame: Optional[RenderFrame] = None
    demo_active: bool = True


class PaletteController:
    """Turns view events into full palette recomputations."""
    
    def __init__(
        self,
        presenter: Presenter,
        session: Optional[RenderSession] = None,
        limit: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        self.presenter = presenter
        self.session = session or RenderSession()
        self.limit = config.PALETTE_LIMIT if limit is None else limit
        self._rng = rng
        validate_filter(self.session.filter)
    
    def render(self) -> RenderFrame:
        """Recompute schemes from the current base text and present them."""
        start_time = time.time()
        base_text = str(self.session.base_text or "").strip() or config.DEFAULT_BASE_COLOR
        
        schemes = generate_schemes(base_text)
        frame = build_frame(schemes, self.session.filter, self.limit)
        self.session.schemes = schemes
        self.session.frame = frame
        
        duration_ms = (time.time() - start_time) * 1000
        if config.METRICS_ENABLED:
            get_metrics().record_timing("render", duration_ms)
        logger.debug("Palette rendered", extra={
            "base_hex": frame.base_hex,
            "filter": frame.filter,
            "items": len(frame.items),
            "duration_ms": round(duration_ms, 3)
        })
        
        self.presenter.present(frame)
        return frame
    
    def set_base_color(self, text: str) -> RenderFrame:
        """Base color text changed."""
        self.session.base_text = text
        return self.render()
    
    def randomize(self) -> RenderFrame:
        """Replace the base color with a random one."""
        return self.set_base_color(random_hex(self._rng))
    
    def select_filter(self, palette_filter: str) -> RenderFrame:
        """Switch the active category tab."""
        self.session.filter = validate_filter(palette_filter)
        return self.render()
    
    def current_hexes(self) -> Optional[list]:
        """Hex values of the current view, or None before the first render."""
        if self.session.schemes is None:
            return None
        return palette_hexes(self.session.schemes, self.session.filter, self.limit)
    
    def export_css(self) -> Optional[str]:
        """CSS custom-property block for the current view."""
        hexes = self.current_hexes()
        return None if hexes is None else css_variables_block(hexes, self.limit)
    
    def export_hexes(self) -> Optional[str]:
        """Comma-joined hex list for the current view."""
        hexes = self.current_hexes()
        return None if hexes is None else hex_list(hexes, self.limit)


class DemoAutoAdvance:
    """
    Cycles the category filter on a timer until the user interacts.
    
    Cancellation is one-shot: once an interaction of a kind in
    DEMO_CANCEL_EVENTS arrives, the demo never resumes for this session.
    """
    
    def __init__(
        self,
        controller: PaletteController,
        filters: Sequence[str] = PALETTE_FILTERS,
        interval_ms: Optional[int] = None,
        start_delay_ms: Optional[int] = None
    ):
        self.controller = controller
        self.filters = tuple(validate_filter(f) for f in filters)
        self.interval = (config.DEMO_INTERVAL_MS if interval_ms is None else interval_ms) / 1000
        self.start_delay = (config.DEMO_START_DELAY_MS if start_delay_ms is None else start_delay_ms) / 1000
        self._index = 1  # filters[0] is already showing
        self._task: Optional[asyncio.Task] = None
    
    @property
    def active(self) -> bool:
        return self.controller.session.demo_active
    
    def tick(self) -> Optional[RenderFrame]:
        """Advance to the next filter and re-render; no-op once stopped."""
        if not self.active or not self.filters:
            return None
        palette_filter = self.filters[self._index % len(self.filters)]
        self._index += 1
        return self.controller.select_filter(palette_filter)
    
    def start(self) -> Optional[asyncio.Task]:
        """
        Schedule the auto-advance loop on the running event loop.
        
        Returns:
            The loop task, or None when already started, stopped, or there
            is nothing to cycle through
        """
        if self._task is not None or not self.active or len(self.filters) <= 1:
            return None
        self._task = asyncio.get_running_loop().create_task(self._run())
        self._task.add_done_callback(self._on_done)
        return self._task
    
    def _on_done(self, task: asyncio.Task):
        """Report a loop that died on an exception and end the demo."""
        if task.cancelled() or task.exception() is None:
            return
        error = task.exception()
        logger.error(f"Demo auto-advance failed: {error}", extra={"error_type": type(error).__name__})
        if config.METRICS_ENABLED:
            get_metrics().increment_failure_count("demo_tick")
        self.controller.session.demo_active = False
    
    async def _run(self):
        await asyncio.sleep(self.start_delay)
        while self.active:
            await asyncio.sleep(self.interval)
            self.tick()
    
    def handle_interaction(self, kind: str, trusted: bool = True) -> bool:
        """
        Feed a user interaction event.
        
        Args:
            kind: Event kind, e.g. "click" or "keydown"
            trusted: False for synthetic events, which never stop the demo
            
        Returns:
            True if this event stopped the demo
        """
        if not trusted or kind not in DEMO_CANCEL_EVENTS or not self.active:
            return False
        logger.info("Demo auto-advance stopped by user interaction", extra={"event": kind})
        self.stop()
        return True
    
    def stop(self):
        """Permanently disable auto-advance and cancel the pending loop."""
        self.controller.session.demo_active = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
