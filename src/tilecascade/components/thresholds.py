from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class GroupSizeThresholds:
    """Ordered group-size thresholds (a <= b <= c) defining the icon tiers.

    Stored on the board entity and replaced as a whole whenever the settings
    change, so classification never observes a half-written triple.
    """
    a: int = 2
    b: int = 3
    c: int = 5

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)
