"""
Ordered SQL scripts with destructive-statement confirmation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Sequence

from ..adapters.base import DatabaseAdapter
from ..security.destructive import confirm_destructive_operation
from ..utils import get_logger

_DESTRUCTIVE_RE = re.compile(r"^\s*(drop|truncate)\b", re.IGNORECASE)

logger = get_logger("schema.script")


@dataclass
class ScriptStatement:
    sql: str
    params: Sequence[Any] = field(default_factory=tuple)
    destructive: bool = False
    description: str | None = None

    @property
    def label(self) -> str:
        return self.description or " ".join(self.sql.split())


class SchemaScript:
    """
    A linear sequence of statements executed strictly in order.

    Destructive statements are confirmed up front, so a refused script
    leaves the database untouched. Outside autocommit mode the script runs
    in one transaction and is rolled back on the first failure.
    """

    def __init__(self, statements: Sequence[ScriptStatement] | None = None) -> None:
        self.statements: List[ScriptStatement] = list(statements or [])

    def __iter__(self) -> Iterator[ScriptStatement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def add(self, sql: str, params: Sequence[Any] = (), *, description: str | None = None) -> None:
        self.statements.append(
            ScriptStatement(
                sql=sql,
                params=tuple(params),
                destructive=bool(_DESTRUCTIVE_RE.match(sql)),
                description=description,
            )
        )

    @classmethod
    def from_sql(cls, text: str) -> "SchemaScript":
        script = cls()
        for statement in split_statements(text):
            script.add(statement)
        return script

    def render(self) -> str:
        rendered = []
        for statement in self.statements:
            if statement.params:
                raise ValueError(
                    f"Statement '{statement.label}' has bound parameters and cannot be rendered."
                )
            rendered.append(f"{statement.sql};")
        return "\n".join(rendered) + "\n"

    def run(self, adapter: DatabaseAdapter, *, force: bool = False) -> None:
        for statement in self.statements:
            if statement.destructive:
                confirm_destructive_operation(statement.label, force=force)

        transactional = not adapter.autocommit
        if transactional:
            adapter.begin()
        try:
            for index, statement in enumerate(self.statements, start=1):
                logger.debug("Executing statement %s/%s: %s", index, len(self), statement.label)
                adapter.execute(statement.sql, statement.params)
        except Exception:
            if transactional:
                logger.error("Script failed; rolling back")
                adapter.rollback()
            raise
        if transactional:
            adapter.commit()
        logger.info("Executed %s statement(s)", len(self))


_SKIPPED_RE = re.compile(
    r"""
      (?P<quoted>'(?:[^']|'')*' | "(?:[^"]|"")*")
    | (?P<dollar>\$(?P<tag>(?:[A-Za-z_]\w*)?)\$.*?\$(?P=tag)\$)
    | (?P<line_comment>--[^\n]*)
    | (?P<block_comment>/\*.*?\*/)
    """,
    re.VERBOSE | re.DOTALL,
)
_DOLLAR_OPEN_RE = re.compile(r"\$(?:[A-Za-z_]\w*)?\$")


def split_statements(text: str) -> List[str]:
    """
    Split a SQL text on ``;`` into individual statements.

    A ``;`` does not end a statement inside single-quoted literals,
    double-quoted identifiers, ``$$``/``$tag$`` dollar-quoted bodies or
    comments. Comments are dropped (block comments do not nest). Empty
    fragments are dropped too. An unterminated quote or comment raises
    ``ValueError``.
    """
    statements: List[str] = []
    current: List[str] = []
    idx = 0
    while idx < len(text):
        char = text[idx]
        if char == ";":
            _append_statement(statements, current)
            current = []
            idx += 1
            continue
        if char in "'\"-/$" and not _inside_identifier(text, idx):
            match = _SKIPPED_RE.match(text, idx)
            if match:
                if match.lastgroup == "block_comment":
                    current.append(" ")
                elif match.lastgroup != "line_comment":
                    current.append(match.group())
                idx = match.end()
                continue
            if char in "'\"" or text.startswith("/*", idx) or _DOLLAR_OPEN_RE.match(text, idx):
                raise ValueError(f"Unterminated quote or comment at offset {idx} in SQL script.")
        current.append(char)
        idx += 1
    _append_statement(statements, current)
    return statements


def _inside_identifier(text: str, idx: int) -> bool:
    # "$" continues an identifier such as price$2, it opens nothing there.
    return text[idx] == "$" and idx > 0 and (text[idx - 1].isalnum() or text[idx - 1] == "_")


def _append_statement(statements: List[str], chars: List[str]) -> None:
    statement = "".join(chars).strip()
    if statement:
        statements.append(statement)
