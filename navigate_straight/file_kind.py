"""Classification of declaring files."""

from enum import Enum


class FileKind(Enum):
    """Whether a file was written by hand or emitted by a code generator."""

    USER_AUTHORED = "user_authored"
    GENERATED = "generated"
