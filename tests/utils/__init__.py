"""Test helpers shared across decostore tests."""

from decostore import Point, Range


def span(path, start, end, **metadata):
    """Range inside a single text node."""
    return Range(Point(tuple(path), start), Point(tuple(path), end), **metadata)


class Recorder:
    """Zero-argument listener that records its calls into a shared log."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def __call__(self):
        self.log.append(self.name)
