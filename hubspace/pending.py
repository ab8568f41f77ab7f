"""Hue and saturation awaiting a combined color write."""

from __future__ import annotations


class PendingColorState:
    """Hold at most one uncommitted hue and saturation for an accessory.

    The host writes hue and saturation separately but the device only takes
    one RGB value, so the first arriving component waits here until the other
    one is known. Newer values overwrite older ones.

    All methods are synchronous. Callers running on an event loop get the
    check-then-consume sequence as a single step, as long as no ``await``
    happens between :meth:`is_complete` and :meth:`consume`.
    """

    def __init__(self) -> None:
        self._hue: float | None = None
        self._saturation: float | None = None

    @property
    def hue(self) -> float | None:
        """Return the pending hue, if any."""
        return self._hue

    @property
    def saturation(self) -> float | None:
        """Return the pending saturation, if any."""
        return self._saturation

    def set_hue(self, hue: float) -> None:
        """Record a hue, replacing any unconsumed one."""
        self._hue = hue

    def set_saturation(self, saturation: float) -> None:
        """Record a saturation, replacing any unconsumed one."""
        self._saturation = saturation

    def is_complete(self) -> bool:
        """Return True if both hue and saturation are set."""
        return self._hue is not None and self._saturation is not None

    def consume(self) -> tuple[float, float]:
        """Return the pending pair and clear it."""
        if self._hue is None or self._saturation is None:
            raise RuntimeError(f"Pending color is incomplete: {self!r}")

        pair = (self._hue, self._saturation)
        self.reset()
        return pair

    def reset(self) -> None:
        """Clear both values."""
        self._hue = None
        self._saturation = None

    def __repr__(self) -> str:
        return f"<PendingColorState hue={self._hue} saturation={self._saturation}>"
