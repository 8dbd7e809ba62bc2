"""Snake body model. Collision rules live in the game loop, not here."""

from collections import deque


class Snake:
    """Ordered body segments, head first."""

    def __init__(self, cells):
        self.segments = deque(cells)
        if not self.segments:
            raise ValueError("A snake needs at least one segment.")

    @classmethod
    def at(cls, cell):
        """Create a length-1 snake on ``cell``."""
        return cls([cell])

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __contains__(self, cell):
        return cell in self.segments

    @property
    def head(self):
        return self.segments[0]

    @property
    def body(self):
        """Segments behind the head."""
        return list(self.segments)[1:]

    @property
    def cells(self):
        return tuple(self.segments)

    def move(self, direction):
        """Return the cell the head would occupy after one step, without moving."""
        x, y = self.head
        dx, dy = direction
        return (x + dx, y + dy)

    def occupies_body(self, cell):
        """True if ``cell`` is any segment other than the head."""
        return cell in self.body

    def grow(self, head):
        """Prepend a new head and keep the tail."""
        self.segments.appendleft(head)

    def advance(self, head):
        """Prepend a new head and drop the tail."""
        self.segments.appendleft(head)
        self.segments.pop()
