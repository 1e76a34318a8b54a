from dataclasses import dataclass

from zombie_replay.entity import MAX_HEALTH
from zombie_replay.types import EntityType


@dataclass(frozen=True)
class RenderStyle:
    """Presentation settings of the animated renderer.

    Attributes:
        label_color: Fill colour of item labels.
        label_font_size: Label font size in pixels.
        label_offset: Distance between the label baseline and the sprite top.
        health_bar_color: Foreground (remaining health) bar colour.
        health_bar_bg_color: Background (full width) bar colour.
        health_bar_ratio: Full bar width as a fraction of the cell size.
        health_bar_height: Bar height in pixels.
        zombie_max_health: Health that maps to a full bar.
        frame_swap_count: Frames per replay step for cyclic sprite animation;
            one frame lasts ``replay_speed / frame_swap_count``.
        clamp_motion: Clamp slide progress to ``[0, 1]``. Off by default, in
            which case items keep moving past their target while the draw loop
            runs on for other effects.
    """

    label_color: str = "#FFF"
    label_font_size: int = 18
    label_offset: float = 10
    health_bar_color: str = "#F00"
    health_bar_bg_color: str = "#FFF"
    health_bar_ratio: float = 0.8
    health_bar_height: float = 2
    zombie_max_health: int = MAX_HEALTH[EntityType.ZOMBIE]
    frame_swap_count: int = 4
    clamp_motion: bool = False

    @property
    def health_bar_margin(self) -> float:
        """Horizontal inset of the bar, as a fraction of the cell size."""
        return (1.0 - self.health_bar_ratio) / 2


DEFAULT_STYLE = RenderStyle()
