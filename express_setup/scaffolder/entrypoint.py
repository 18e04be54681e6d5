"""Entry-point source selection.

Each ``(language, module_system)`` pair maps to one ``EntryVariant``.  All
four variants serve the same two routes (``/`` and ``/health``); they differ
only in import syntax and whether handler parameters carry type annotations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..models import Answers, Language, ModuleSystem


@dataclass(frozen=True)
class EntryVariant:
    template: str
    # Handler parameter types; None leaves the parameters untyped.
    request_type: Optional[str] = None
    response_type: Optional[str] = None

    @property
    def typed(self) -> bool:
        return self.request_type is not None

    def context(self) -> dict[str, Any]:
        return {
            "typed": self.typed,
            "request_type": self.request_type,
            "response_type": self.response_type,
        }


ENTRY_VARIANTS: dict[tuple[Language, ModuleSystem], EntryVariant] = {
    (Language.TYPESCRIPT, ModuleSystem.ESM): EntryVariant(
        template="entry/esm.j2", request_type="Request", response_type="Response"
    ),
    (Language.TYPESCRIPT, ModuleSystem.COMMONJS): EntryVariant(
        template="entry/commonjs.j2",
        request_type="express.Request",
        response_type="express.Response",
    ),
    (Language.JAVASCRIPT, ModuleSystem.ESM): EntryVariant(template="entry/esm.j2"),
    (Language.JAVASCRIPT, ModuleSystem.COMMONJS): EntryVariant(template="entry/commonjs.j2"),
}


def entry_variant(answers: Answers) -> EntryVariant:
    return ENTRY_VARIANTS[answers.variant]


def entry_filename(answers: Answers) -> str:
    return f"index.{answers.source_extension}"
