"""Order in which the slideshow walks the photo collection."""

import random
from dataclasses import dataclass, field

from photo_slideshow.domain.models import PlayMode


@dataclass
class PlayOrder:
    """Sequence of photo indices consumed by the slideshow cursor.

    Sequential mode walks the order as it stands, which is the identity until
    someone shuffles it; random mode regenerates a uniform shuffle on demand.
    """

    rng: random.Random = field(default_factory=random.Random)
    indices: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.indices)

    def __getitem__(self, position: int) -> int:
        return self.indices[position]

    def rebuild(self, size: int, play_mode: PlayMode) -> None:
        """Regenerate the order for a collection of ``size`` photos."""
        indices = list(range(size))
        if play_mode == "random":
            self.rng.shuffle(indices)
        self.indices = indices

    def shuffle(self, size: int) -> None:
        """Shuffle the whole collection whatever the play mode."""
        indices = list(range(size))
        self.rng.shuffle(indices)
        self.indices = indices

    def resize(self, size: int, play_mode: PlayMode) -> None:
        """Follow a collection change.

        In sequential mode a grown collection keeps the current order and
        appends the new photos at the end; anything else is rebuilt.
        """
        current = len(self.indices)
        if play_mode == "auto" and current <= size and sorted(self.indices) == list(
            range(current)
        ):
            self.indices.extend(range(current, size))
            return
        self.rebuild(size, play_mode)
