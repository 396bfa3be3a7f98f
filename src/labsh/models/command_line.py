"""Values produced by the line reader."""

from dataclasses import dataclass

from labsh.constants import LINE_TERMINATOR


@dataclass(frozen=True)
class CommandLine:
    """One user-submitted line with its terminator stripped."""

    value: bytes
    truncated: bool = False

    def __post_init__(self) -> None:
        if LINE_TERMINATOR in self.value:
            raise ValueError("command line must not contain a line terminator")

    @property
    def text(self) -> str:
        return self.value.decode(errors="surrogateescape")

    def __len__(self) -> int:
        return len(self.value)


class EndOfStream:
    """Marker returned when the input stream has no further data."""

    _instance: "EndOfStream | None" = None

    def __new__(cls) -> "EndOfStream":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END_OF_STREAM"


END_OF_STREAM = EndOfStream()
