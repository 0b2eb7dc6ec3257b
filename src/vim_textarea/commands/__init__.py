"""Stateless editing commands and the context they execute against."""

from .base import (
    EXECUTED,
    IGNORED,
    BaseCommand,
    ChangeCommand,
    Command,
    DeleteCommand,
    EditorContext,
    ExecuteResult,
    InsertCommand,
    ModeEntryCommand,
    MotionCommand,
)
from .change import (
    ChangeLine,
    ChangeLinesDown,
    ChangeLinesUp,
    ChangeToEol,
    ChangeToFirstLine,
    ChangeToLastLine,
    ChangeToLineStart,
    ChangeWord,
)
from .delete import (
    DeleteChar,
    DeleteLine,
    DeleteLinesDown,
    DeleteLinesUp,
    DeleteToEol,
    DeleteToFirstLine,
    DeleteToLastLine,
    DeleteWord,
)
from .insert import (
    Backspace,
    DeleteForward,
    InsertSpace,
    InsertText,
    KillToLineEnd,
    KillToLineStart,
    OpenLineAbove,
    OpenLineBelow,
    SplitLine,
)
from .mode import (
    EnterInsert,
    EscapeInsert,
    EscapeNormal,
    InsertAfter,
    InsertAtEnd,
    InsertAtStart,
)
from .motion import (
    ArrowDown,
    ArrowLeft,
    ArrowRight,
    ArrowUp,
    LineEndInsert,
    LineStartInsert,
    MoveDown,
    MoveFirstLine,
    MoveFirstNonBlank,
    MoveLastLine,
    MoveLeft,
    MoveLineEnd,
    MoveLineStart,
    MoveRight,
    MoveUp,
    MoveWordBackward,
    MoveWordEnd,
    MoveWordForward,
)
from .paste import PasteAfter, PasteBefore
from .replace import (
    EnterReplace,
    ReplaceBackspace,
    ReplaceChar,
    ReplaceEscape,
    ReplaceSpace,
    ReplaceText,
)
from .special import SUBMIT_KEYS, Redo, StartPending, Submit, Undo
from .textobject import (
    TEXT_OBJECT_COMMANDS,
    ChangeTextObject,
    DeleteTextObject,
    VisualSelectTextObject,
    YankTextObject,
)
from .visual import (
    EnterVisual,
    EnterVisualLine,
    VisualChange,
    VisualDelete,
    VisualEscape,
    VisualSwapAnchor,
    VisualToggle,
    VisualToggleLine,
    VisualYank,
)
from .yank import YankLine, YankToEol, YankWord

__all__ = [
    "Command",
    "BaseCommand",
    "EditorContext",
    "ExecuteResult",
    "EXECUTED",
    "IGNORED",
    "MotionCommand",
    "DeleteCommand",
    "ChangeCommand",
    "ModeEntryCommand",
    "InsertCommand",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "MoveDown",
    "MoveWordForward",
    "MoveWordBackward",
    "MoveWordEnd",
    "MoveLineStart",
    "MoveLineEnd",
    "MoveFirstNonBlank",
    "MoveFirstLine",
    "MoveLastLine",
    "LineStartInsert",
    "LineEndInsert",
    "ArrowLeft",
    "ArrowRight",
    "ArrowUp",
    "ArrowDown",
    "DeleteChar",
    "DeleteLine",
    "DeleteWord",
    "DeleteToEol",
    "DeleteLinesDown",
    "DeleteLinesUp",
    "DeleteToLastLine",
    "DeleteToFirstLine",
    "ChangeLine",
    "ChangeWord",
    "ChangeToEol",
    "ChangeToLineStart",
    "ChangeLinesDown",
    "ChangeLinesUp",
    "ChangeToLastLine",
    "ChangeToFirstLine",
    "YankLine",
    "YankWord",
    "YankToEol",
    "PasteAfter",
    "PasteBefore",
    "ReplaceChar",
    "EnterReplace",
    "ReplaceText",
    "ReplaceSpace",
    "ReplaceBackspace",
    "ReplaceEscape",
    "DeleteTextObject",
    "ChangeTextObject",
    "YankTextObject",
    "VisualSelectTextObject",
    "TEXT_OBJECT_COMMANDS",
    "EnterInsert",
    "InsertAfter",
    "InsertAtEnd",
    "InsertAtStart",
    "EscapeInsert",
    "EscapeNormal",
    "InsertText",
    "InsertSpace",
    "SplitLine",
    "Backspace",
    "DeleteForward",
    "KillToLineStart",
    "KillToLineEnd",
    "OpenLineBelow",
    "OpenLineAbove",
    "EnterVisual",
    "EnterVisualLine",
    "VisualEscape",
    "VisualToggle",
    "VisualToggleLine",
    "VisualSwapAnchor",
    "VisualYank",
    "VisualDelete",
    "VisualChange",
    "Undo",
    "Redo",
    "StartPending",
    "Submit",
    "SUBMIT_KEYS",
]
