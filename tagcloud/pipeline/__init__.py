"""tagcloud.pipeline — words in, packed tag cloud out.

Quick start
-----------
>>> from tagcloud.pipeline import TagCloud
>>> cloud = TagCloud()
>>> layout = cloud.process_text("the quick brown fox jumps over the lazy dog")
>>> cloud.render(layout).save("cloud.png")

Step-by-step
------------
>>> freqs  = cloud.count(words)
>>> tags   = cloud.build_tags(freqs)
>>> layout = cloud.layout(tags)

Custom adapters
---------------
>>> from tagcloud.rendering import FixedAspectMeasurer
>>> cloud = TagCloud(measurer=FixedAspectMeasurer(char_aspect=0.55))
"""

from tagcloud.pipeline.frequency import FrequencyTags, tokenize
from tagcloud.pipeline.models import CloudLayout, PlacedTag, Tag
from tagcloud.pipeline.pipeline import TagCloud
from tagcloud.pipeline.sizing import FontSizeScaler

__all__ = [
    # Pipeline
    "TagCloud",
    # Data models
    "Tag",
    "PlacedTag",
    "CloudLayout",
    # Steps
    "FrequencyTags",
    "FontSizeScaler",
    "tokenize",
]
