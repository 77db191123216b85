"""Turn a classification into full-line suggestions from the working directory."""

from __future__ import annotations

import fnmatch
import os
import threading

from devenv_predictor.classifier import ClassificationResult, NoArgumentYet, PartialArgument

# Solutions are listed before projects.
PROJECT_FILE_EXTENSIONS = (".sln", ".csproj")


class _Cancelled(Exception):
    pass


def suggest(
    result: ClassificationResult,
    cwd: str | None,
    full_input_text: str,
    cancel_event: threading.Event | None = None,
) -> tuple[str, ...] | None:
    """Return replacement lines, or None when there is no opinion.

    An empty tuple means the line matched but no file did. File system errors
    and cancellation both give None.
    """

    if cwd is None:
        return None

    match result:
        case NoArgumentYet():
            prefix = ""
            line_prefix = _with_separator(full_input_text)
        case PartialArgument(prefix=prefix, command_prefix_text=line_prefix):
            pass
        case _:
            return None

    try:
        names = _list_project_files(cwd, prefix, cancel_event)
    except (OSError, _Cancelled):
        return None
    return tuple(line_prefix + name for name in names)


def _list_project_files(directory: str, prefix: str = "", cancel_event: threading.Event | None = None) -> list[str]:
    """List top-level `{prefix}*.sln` then `{prefix}*.csproj` file names.

    Names keep directory listing order inside each extension group.
    """

    names: list[str] = []
    for extension in PROJECT_FILE_EXTENSIONS:
        pattern = _escape_brackets(prefix) + "*" + extension
        _check_cancelled(cancel_event)
        with os.scandir(directory) as entries:
            for entry in entries:
                _check_cancelled(cancel_event)
                if fnmatch.fnmatch(entry.name, pattern) and entry.is_file():
                    names.append(entry.name)
    return names


def _with_separator(text: str) -> str:
    if not text or text[-1].isspace():
        return text
    return text + " "


def _escape_brackets(prefix: str) -> str:
    # `*` and `?` stay wildcards; character classes are not part of the pattern language.
    return prefix.replace("[", "[[]")


def _check_cancelled(cancel_event: threading.Event | None) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise _Cancelled
