import math

# Vertical layout, as fractions of the plot height.
Y_PAD = 0.05
Y_TEXT = 0.02
Y_BOTTOM = Y_PAD + Y_TEXT


def layout(n):
    """Return (pad, width, cap_width) for n boxes side by side.

    The n boxes and the n + 1 gaps around them fill [0, 1] exactly.
    """
    pad = (1.0 / n) / 3.0
    width = (1.0 - (n + 1) * pad) / n
    return pad, width, width / 4.0


def min_max(boxes):
    """Return the smallest minimum and largest maximum over all boxes."""
    lo, hi = math.inf, -math.inf
    for b in boxes:
        lo = min(lo, b.min)
        hi = max(hi, b.max)
    return lo, hi


def make_tr(min0, max0, min1, max1):
    """Return a function that maps [min0, max0] linearly onto [min1, max1].

    If the source range is a single point every value maps to the middle of
    the target range.
    """
    d0 = max0 - min0
    d1 = max1 - min1
    if d0 == 0:
        mid = min1 + d1 / 2.0
        return lambda v: mid
    return lambda v: ((v - min0) / d0) * d1 + min1


def fmt(v, spec="f"):
    """Format a float, spelling NaN and infinities as +Inf, -Inf and NaN."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    return format(v, spec)


class Plot:
    """Writes plot(1) commands to a text stream."""

    def __init__(self, out):
        self.out = out

    def move(self, x, y):
        self.out.write(f"m {fmt(x)} {fmt(y)}\n")

    def text(self, s, align="C"):
        # \C centers the text on the current point, \R right aligns it.
        self.out.write(f't "\\{align}{s}"\n')

    def label(self, x, y, v):
        self.move(x, y)
        self.text(fmt(v, ".3g"), align="R")

    def box(self, x0, y0, x1, y1):
        self.out.write(f"bo {fmt(x0)} {fmt(y0)} {fmt(x1)} {fmt(y1)}\n")

    def line(self, x0, y0, x1, y1):
        self.out.write(f"li {fmt(x0)} {fmt(y0)} {fmt(x1)} {fmt(y1)}\n")

    def clear(self):
        self.out.write("cl\n")


def draw(boxes, title, out):
    """Draw summarized boxes side by side on one shared vertical scale.

    Args:
        boxes (list): Summarized Box objects, drawn left to right.
        title (str): Plot title. Empty means no title row.
        out: Text stream the plot(1) commands are written to.
    """
    p = Plot(out)
    y_top = 1.0 - Y_PAD
    if title:
        p.move(0.5, 1.0 - Y_TEXT)
        p.text(title)
        y_top -= Y_TEXT

    # Nothing to lay out, just finish the drawing.
    if not boxes:
        p.clear()
        return

    pad, width, cap_width = layout(len(boxes))
    tr = make_tr(*min_max(boxes), Y_BOTTOM, y_top)

    x = pad
    for b in boxes:
        v_min, q1, q2, q3, v_max = b.summary()
        c = x + width / 2.0
        p.move(c, Y_TEXT)
        p.text(b.name)

        bottom, top = tr(q1), tr(q3)
        p.box(x, bottom, x + width, top)
        p.label(x, bottom, q1)
        p.label(x, top, q3)

        med = tr(q2)
        p.line(x, med, x + width, med)
        p.label(x, med, q2)

        # Whiskers, capped at the min and max.
        lo = tr(v_min)
        p.line(c - cap_width, lo, c + cap_width, lo)
        p.line(c, bottom, c, lo)
        p.label(c - cap_width, lo, v_min)

        hi = tr(v_max)
        p.line(c - cap_width, hi, c + cap_width, hi)
        p.line(c, top, c, hi)
        p.label(c - cap_width, hi, v_max)

        x += width + pad
    p.clear()
