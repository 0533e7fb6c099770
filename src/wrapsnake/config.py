# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
WIDTH, HEIGHT = 640, 480
CELL_SIZE = 32
GRID_W, GRID_H = 20, 14
HUD_TOP = GRID_H * CELL_SIZE   # HUD strip below the board

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (30, 30, 36)
GREEN = (80, 200, 80)
HEAD  = (130, 235, 130)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
DIM   = (120, 120, 130)

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> nondeterministic food/snake placement
    initial_speed: int = 8         # ticks per second
    min_speed: int = 1
    max_speed: int = 30
    initial_length: int = 3
    input_queue_size: int = 8      # oldest key press is evicted beyond this

    def __post_init__(self):
        if self.min_speed < 1 or self.max_speed < self.min_speed:
            raise ValueError(
                f"Invalid speed bounds: [{self.min_speed}, {self.max_speed}]"
            )
        if not self.min_speed <= self.initial_speed <= self.max_speed:
            raise ValueError(
                f"initial_speed {self.initial_speed} outside "
                f"[{self.min_speed}, {self.max_speed}]"
            )
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be >= 1, got {self.initial_length}")
        if self.input_queue_size < 1:
            raise ValueError(f"input_queue_size must be >= 1, got {self.input_queue_size}")

    def clamp_speed(self, speed: int) -> int:
        return max(self.min_speed, min(self.max_speed, speed))

    def tick_ms(self, speed: int) -> float:
        """Tick period for a speed, in milliseconds."""
        return 1000 / self.clamp_speed(speed)

CFG = Config()
