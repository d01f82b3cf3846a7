from boxplot.stats import stats5


class Box:
    """A named data set and its five statistic summary."""

    def __init__(self, name, values=None):
        self.name = name
        self.values = list(values) if values is not None else []
        self.min = self.q1 = self.q2 = self.q3 = self.max = 0.0

    def summarize(self):
        # Boxes without data keep the zero summary.
        if self.values:
            self.min, self.q1, self.q2, self.q3, self.max = stats5(self.values)
        return self

    def summary(self):
        return self.min, self.q1, self.q2, self.q3, self.max

    def __repr__(self):
        return f"Box({self.name!r}, {self.values!r})"


class TokenReader:
    """Iterate over tokens with one token of lookahead."""

    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self._next = None
        self._have = False

    def peek(self):
        """Return the next token without consuming it, or None at the end."""
        if not self._have:
            self._next = next(self._tokens, None)
            self._have = True
        return self._next

    def next(self):
        token = self.peek()
        self._have = False
        return token

    def empty(self):
        return self.peek() is None


def tokens(text):
    """Split text into maximal runs of non-whitespace characters."""
    return text.split()


def parse_float(token):
    """Parse a token as a 64-bit float.

    Accepts ASCII decimal and scientific notation, signed inf and infinity,
    unsigned nan, and hexadecimal floats with a binary exponent such as
    0x1.8p3. Returns None if the token is not a number.
    """
    # float() also takes digit separators, non-ASCII digits and a signed
    # nan, none of which are numbers here.
    if not token.isascii() or "_" in token:
        return None
    if token[:1] in ("+", "-") and token[1:].lower() == "nan":
        return None
    try:
        return float(token)
    except ValueError:
        pass
    if token.lstrip("+-")[:2].lower() == "0x" and "p" in token.lower():
        try:
            return float.fromhex(token)
        except ValueError:
            return None
    return None


def read_box(reader):
    """Read one box from a TokenReader.

    The next token is the name of the box. Following tokens that parse as
    floats are the box data. Reading stops at the end of the tokens or at
    the first token that is not a number; that token is left unread and
    names the next box.
    """
    b = Box(reader.next())
    while not reader.empty():
        v = parse_float(reader.peek())
        if v is None:
            break
        b.values.append(v)
        reader.next()
    return b.summarize()


def read_boxes(stream):
    """Read all boxes of the form <name> <number>* from a text stream.

    Raises:
        OSError: If reading the stream fails.
    """
    reader = TokenReader(tokens(stream.read()))
    boxes = []
    while not reader.empty():
        boxes.append(read_box(reader))
    return boxes
