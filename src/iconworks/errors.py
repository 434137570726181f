"""Exception hierarchy shared by the iconworks modules."""

from __future__ import annotations


class IconworksError(RuntimeError):
    """Base class for every error raised by iconworks."""


class MalformedMarker(IconworksError):
    """A ``${cN}`` marker whose index does not fit an unsigned 8-bit value."""

    def __init__(self, marker: str, digits: str) -> None:
        self.marker = marker
        self.digits = digits
        super().__init__(f"Invalid colour marker {marker!r}: index must be 0-255")


class HeightOverflow(IconworksError):
    def __init__(self, lines: int, limit: int) -> None:
        self.lines = lines
        self.limit = limit
        super().__init__(f"Art has {lines} lines; at most {limit} are supported")


class SegmentCountMismatch(IconworksError):
    """Raised in strict mode when markers and chunks cannot be paired 1:1."""

    def __init__(self, markers: int, chunks: int) -> None:
        self.markers = markers
        self.chunks = chunks
        super().__init__(
            f"Found {markers} colour markers but {chunks} text chunks after the preamble"
        )


class ByteCountOutOfRange(IconworksError):
    def __init__(self, magnitude: int) -> None:
        self.magnitude = magnitude
        super().__init__(f"Cannot format byte count {magnitude}: outside 0..1024**7")


class ArtDefinitionError(IconworksError):
    """A raw icon record could not be turned into a definition."""


class ColorSpecError(ArtDefinitionError):
    def __init__(self, spec: object, reason: str = "unrecognised colour") -> None:
        self.spec = spec
        super().__init__(f"{reason}: {spec!r}")


class CatalogLoadError(IconworksError):
    """An icon or colour-scheme data file could not be read or parsed."""


class UnknownIcon(IconworksError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Could not find an icon for {name}")


class UnknownColorScheme(IconworksError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Failed to find scheme {name}")
