"""Random album selection for the home page "surprise me" link."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from gizz.content.errors import ContentNotFoundError
from gizz.content.index import ContentIndex

logger = logging.getLogger(__name__)


def pick_random(identifiers: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one identifier uniformly at random.

    Args:
        identifiers: Known slugs
        rng: Random source (defaults to the ``random`` module)

    Raises:
        ContentNotFoundError: If there is nothing to pick from
    """
    if not identifiers:
        raise ContentNotFoundError("No content available to pick from")

    chooser = rng if rng is not None else random
    return chooser.choice(list(identifiers))


def random_album(
    index: ContentIndex | None = None,
    sub_path: str = "albums",
    rng: random.Random | None = None,
) -> str:
    """Pick a random album slug from the content index."""
    if index is None:
        index = ContentIndex()

    slugs = index.slugs(sub_path)
    logger.debug("Picking from %d %s", len(slugs), sub_path)
    try:
        return pick_random(slugs, rng=rng)
    except ContentNotFoundError as e:
        raise ContentNotFoundError(f"No content found in {index.data_root / sub_path}") from e
