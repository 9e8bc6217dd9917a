"""Attachments that make observations multimodal."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import ClassVar, Optional

from .errors import SerializationError


def _lines(text):
    """Split into lines on LF, dropping a trailing CR and a final empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


class Attachment:
    """Base of all attachment kinds; each kind has a snake_case tag."""

    kind: ClassVar[str] = ""
    _registry: ClassVar[dict] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.kind:
            Attachment._registry[cls.kind] = cls

    def text_content(self):
        """The primary text of the attachment, used for searching."""
        match self:
            case CodeDiff(diff=diff):
                return diff
            case TerminalOutput(output=output):
                return output
            case ErrorTrace(message=message) | GitCommit(message=message):
                return message
        raise TypeError(f"unsupported attachment: {type(self).__name__}")

    def embeddable_text(self):
        """Text combining the context fields, for richer embeddings."""
        match self:
            case CodeDiff(file_path=path, before_hash=before, after_hash=after, diff=diff):
                return f"Code change in {path} ({before}..{after}):\n{diff}"
            case TerminalOutput(command=command, output=output, exit_code=code):
                return f"Command: {command} (exit {code}):\n{output}"
            case ErrorTrace(
                error_type=error_type,
                message=message,
                stack_trace=stack,
                file_line=file_line,
            ):
                if file_line is None:
                    location = "unknown"
                else:
                    location = f"{file_line[0]}:{file_line[1]}"
                return f"{error_type}: {message}\nLocation: {location}\n{stack}"
            case GitCommit(
                hash=commit_hash,
                message=message,
                files_changed=files,
                diff_summary=summary,
            ):
                return f"Commit {commit_hash}: {message}\nFiles: {', '.join(files)}\n{summary}"
        raise TypeError(f"unsupported attachment: {type(self).__name__}")

    def description(self):
        """A short one-line description."""
        match self:
            case CodeDiff(file_path=path):
                return f"Code change in {path}"
            case TerminalOutput(command=command, exit_code=code):
                return f"Command: {command} (exit: {code})"
            case ErrorTrace(error_type=error_type, message=message):
                return f"{error_type}: {message}"
            case GitCommit(hash=commit_hash, message=message):
                return f"Commit {commit_hash[:8]}: {message}"
        raise TypeError(f"unsupported attachment: {type(self).__name__}")

    def to_dict(self):
        """A JSON-ready mapping tagged with the attachment kind."""
        data = {"type": self.kind}
        for key, value in asdict(self).items():
            data[key] = list(value) if isinstance(value, tuple) else value
        return data

    @classmethod
    def from_dict(cls, data):
        """Build an attachment from a mapping produced by to_dict."""
        fields = dict(data)
        kind = fields.pop("type", None)
        target = Attachment._registry.get(kind)
        if target is None:
            raise SerializationError(f"unknown attachment type: {kind!r}")
        try:
            return target(**fields)
        except TypeError as exc:
            raise SerializationError(str(exc)) from None


@dataclass
class CodeDiff(Attachment):
    """A change to one file."""

    kind: ClassVar[str] = "code_diff"

    file_path: str
    before_hash: str
    after_hash: str
    diff: str


@dataclass
class TerminalOutput(Attachment):
    """Output of a command; usually truncated to its last lines."""

    kind: ClassVar[str] = "terminal_output"

    command: str
    output: str
    exit_code: int


@dataclass
class ErrorTrace(Attachment):
    """An error with its stack trace and optional (file, line) location."""

    kind: ClassVar[str] = "error_trace"

    error_type: str
    message: str
    stack_trace: str
    file_line: Optional[tuple] = None

    def __post_init__(self):
        if self.file_line is not None:
            self.file_line = tuple(self.file_line)


@dataclass
class GitCommit(Attachment):
    """A commit with the files it touched."""

    kind: ClassVar[str] = "git_commit"

    hash: str
    message: str
    files_changed: list = field(default_factory=list)
    diff_summary: str = ""


def truncate_terminal_output(output, max_lines):
    """Keep the last max_lines lines, noting how many were dropped."""
    lines = _lines(output)
    if len(lines) <= max_lines:
        return output
    dropped = len(lines) - max_lines
    tail = lines[dropped:]
    return f"... ({dropped} lines truncated)\n" + "\n".join(tail)


@dataclass
class MultimodalObservation:
    """An observation's text together with its attachments."""

    id: int
    text_content: str
    attachments: list = field(default_factory=list)

    def add_attachment(self, attachment):
        """Append an attachment."""
        self.attachments.append(attachment)

    def searchable_text(self):
        """The text and every attachment's primary text, one per line."""
        return "\n".join(
            [self.text_content, *(a.text_content() for a in self.attachments)]
        )