# sprites.py
"""
Drawable sequences keyed by animation state or food kind. The bank never
draws anything itself: it hands back a handle (a pygame Surface in the
real game) or None, meaning "draw the flat-color fallback shape".
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .entities import AnimationState, FoodKind

SpriteKey = Union[AnimationState, FoodKind]


@dataclass
class DrawableSequence:
    frames: List[Any] = field(default_factory=list)
    ready: bool = False


# Lookup order per player state: (key, follow the current frame?).
# The idle fallback always shows its first frame. After the chain: flat color.
FALLBACK_CHAIN: Dict[AnimationState, Tuple[Tuple[AnimationState, bool], ...]] = {
    AnimationState.IDLE: ((AnimationState.IDLE, True),),
    AnimationState.WALKING: ((AnimationState.WALKING, True), (AnimationState.IDLE, False)),
    AnimationState.EATING: ((AnimationState.EATING, True), (AnimationState.IDLE, False)),
    AnimationState.HIT: ((AnimationState.HIT, True), (AnimationState.IDLE, False)),
}


class SpriteBank:
    def __init__(self):
        self._seqs: Dict[SpriteKey, DrawableSequence] = {}

    def register(self, key: SpriteKey, frames: List[Any], ready: bool = True) -> None:
        self._seqs[key] = DrawableSequence(list(frames), ready)

    def mark_ready(self, key: SpriteKey, ready: bool = True) -> None:
        self._seqs.setdefault(key, DrawableSequence()).ready = ready

    def is_ready(self, key: SpriteKey) -> bool:
        seq = self._seqs.get(key)
        return seq is not None and seq.ready and len(seq.frames) > 0

    def frame_count(self, key: SpriteKey) -> int:
        seq = self._seqs.get(key)
        return len(seq.frames) if seq else 0

    def frame_counts(self) -> Dict[AnimationState, int]:
        """Per-state frame counts, as the animation state machine wants them."""
        return {s: self.frame_count(s) for s in AnimationState}

    def _pick(self, key: SpriteKey, index: int) -> Optional[Any]:
        if not self.is_ready(key):
            return None
        frames = self._seqs[key].frames
        return frames[index % len(frames)]

    def player_frame(self, state: AnimationState, frame: int) -> Optional[Any]:
        for key, follow in FALLBACK_CHAIN[state]:
            handle = self._pick(key, frame if follow else 0)
            if handle is not None:
                return handle
        return None

    def food_frame(self, kind: FoodKind, variant: int) -> Optional[Any]:
        return self._pick(kind, variant)
