"""TagCloud: count → size → measure → pack → render."""

from __future__ import annotations

import json
import logging
from typing import Iterable

from PIL import Image
from tqdm import tqdm

from tagcloud._geometry import pad_size
from tagcloud.config import CloudConfig
from tagcloud.layout import RectanglePacker
from tagcloud.pipeline.frequency import FrequencyTags, tokenize
from tagcloud.pipeline.models import CloudLayout, PlacedTag, Tag
from tagcloud.pipeline.sizing import FontSizeScaler
from tagcloud.rendering.image import render_cloud
from tagcloud.rendering.text import BaseMeasurer, PillowMeasurer

logger = logging.getLogger(__name__)


class TagCloud:
    """End-to-end pipeline from words to a packed, renderable tag cloud.

    Every step is exposed individually for fine-grained control, and a single
    ``process()`` call runs the whole thing for convenience.

    Low-level access
    ----------------
    >>> freqs  = cloud.count(["a", "b", "b"])
    >>> tags   = cloud.build_tags(freqs)
    >>> layout = cloud.layout(tags)
    >>> image  = cloud.render(layout)

    High-level access
    -----------------
    >>> layout = cloud.process(words)
    >>> layout = cloud.process_text(open("speech.txt").read())
    >>> data   = TagCloud.to_records(layout)

    Adapter pattern
    ---------------
    Pass a custom ``BaseMeasurer`` or ``FontSizeScaler`` to swap out how tags
    are sized without modifying this class.
    """

    def __init__(
        self,
        *,
        config: CloudConfig | None = None,
        measurer: BaseMeasurer | None = None,
        scaler: FontSizeScaler | None = None,
    ) -> None:
        """
        Args:
            config:   Layout and rendering settings.  Defaults to CloudConfig().
            measurer: Text extent strategy.  Defaults to PillowMeasurer over
                      ``config.font_paths``.
            scaler:   Count → font-size mapping.  Defaults to a linear scaler
                      over ``config.min_font_size .. config.max_font_size``.
        """
        self.config = config or CloudConfig()
        if self.config.padding < 0:
            raise ValueError(f"padding must not be negative, got {self.config.padding}")
        self.measurer = measurer or PillowMeasurer(self.config.font_paths)
        self.scaler = scaler or FontSizeScaler(
            self.config.max_font_size, self.config.min_font_size
        )

    # ── individual steps ────────────────────────────────────────────────────

    def count(self, words: Iterable[str]) -> FrequencyTags:
        return FrequencyTags(words)

    def build_tags(self, frequencies: FrequencyTags) -> list[Tag]:
        """One Tag per distinct label, most frequent (largest) first."""
        font_sizes = self.scaler.scale(frequencies)
        return [
            Tag(
                label=label,
                count=n,
                font_size=font_sizes[label],
                size=self.measurer.measure(label, font_sizes[label]),
            )
            for label, n in frequencies.most_common()
        ]

    def layout(self, tags: Iterable[Tag]) -> CloudLayout:
        """Pack *tags* in the given order with a fresh packer.

        Each rectangle is the measured text grown by ``config.padding``.
        """
        cfg = self.config
        tags = list(tags)
        packer = RectanglePacker(
            angle_step=cfg.angle_step,
            turn_spacing=cfg.turn_spacing,
            restart_spiral=cfg.restart_spiral,
        )
        placed = []
        for tag in tqdm(tags, desc="Placing tags", disable=not cfg.show_progress):
            rect = packer.place(pad_size(tag.size, cfg.padding), payload=tag)
            placed.append(PlacedTag(tag=tag, rectangle=rect))

        layout = CloudLayout(tags=placed, bounds=packer.bounds())
        logger.info(
            "packed %d tags in %d spiral steps, bounds %s",
            len(placed),
            packer.spiral.steps,
            layout.bounds,
        )
        return layout

    def render(self, layout: CloudLayout, *, draw_boxes: bool = False) -> Image.Image:
        cfg = self.config
        return render_cloud(
            layout,
            font_paths=cfg.font_paths,
            margin=cfg.margin,
            background=cfg.background,
            text_color=cfg.text_color,
            draw_boxes=draw_boxes,
        )

    # ── full pipeline ───────────────────────────────────────────────────────

    def process(self, words: Iterable[str]) -> CloudLayout:
        """Count *words*, size the tags, and pack them."""
        frequencies = self.count(words)
        if frequencies.count == 0:
            raise ValueError("Cannot build a tag cloud from an empty word list")
        return self.layout(self.build_tags(frequencies))

    def process_text(self, text: str) -> CloudLayout:
        return self.process(tokenize(text, lowercase=self.config.lowercase))

    # ── output helpers ──────────────────────────────────────────────────────

    @staticmethod
    def to_records(layout: CloudLayout) -> list[dict]:
        return [t.to_dict() for t in layout.tags]

    @staticmethod
    def to_json(layout: CloudLayout, indent: int = 2) -> str:
        return json.dumps(layout.to_dict(), indent=indent)
