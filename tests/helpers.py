class RecordingSurface:
    """Collects draw calls instead of touching a viewport."""

    def __init__(self):
        self.lines = []
        self.circles = []
        self.texts = []

    def draw_line(self, p1, p2, color, thickness):
        self.lines.append((p1, p2))

    def draw_circle(self, center, radius, color, fill, thickness):
        self.circles.append((center, radius, fill))

    def draw_text(self, center, text, size, color):
        self.texts.append((center, text))


# Seed 3106, N = 10, captured once from random.Random(3106).
# Initial fill at density 0.64.
REFERENCE_K0 = [
    "1 0 1 0 0 0 0 0 0 0",
    "0 0 0 0 1 0 1 0 0 0",
    "0 0 1 0 0 1 1 1 0 0",
    "0 0 1 0 0 0 0 0 0 0",
    "1 1 0 0 0 0 0 1 0 0",
    "0 1 1 0 0 0 0 0 0 1",
    "1 0 0 0 0 0 0 0 1 0",
    "0 1 0 1 0 0 0 1 0 0",
    "0 1 0 1 0 0 0 0 0 1",
    "0 0 0 1 0 0 0 0 0 1",
]

# Same stream, regenerated at density 0.70.
REFERENCE_K1 = [
    "1 0 0 0 0 0 1 0 0 0",
    "0 0 0 0 0 0 0 0 0 0",
    "0 0 0 0 0 1 0 0 0 0",
    "0 1 0 0 0 0 0 1 0 1",
    "1 0 0 0 0 1 0 0 0 0",
    "0 0 1 1 1 1 1 0 0 0",
    "0 0 0 0 1 0 0 0 0 0",
    "0 1 0 0 1 1 0 0 0 0",
    "1 0 0 0 0 0 0 1 0 0",
    "0 0 0 0 1 0 1 0 0 0",
]
