"""Emotional salience of a memory, which slows or speeds its decay."""

from dataclasses import dataclass


@dataclass
class MemorySalience:
    """Valence in [-1, 1], surprise and effort in [0, 1]."""

    emotional_valence: float = 0.0
    surprise_factor: float = 0.0
    effort_invested: float = 0.0

    def decay_multiplier(self):
        """Multiplier above 1 for salient memories; never below 0.1."""
        valence_boost = 1.0 + self.emotional_valence * 0.3
        surprise_boost = 1.0 + self.surprise_factor * 0.5
        return max(valence_boost * surprise_boost, 0.1)