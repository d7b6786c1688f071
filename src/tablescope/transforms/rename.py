"""Class renaming transform: moves renderer class names out of the host's reach."""

from __future__ import annotations

import re
from dataclasses import replace

from tablescope.config import ScopeConfig
from tablescope.model.document import MarkupDocument


def class_token_pattern(class_prefix: str) -> re.Pattern:
    """Match *class_prefix* where it starts a token.

    A prefix preceded by a word character or hyphen is part of a longer
    token, so ``new_gt_table`` never matches ``gt_``.
    """
    return re.compile(rf"(?<![\w-]){re.escape(class_prefix)}")


def rename_classes(text: str, config: ScopeConfig) -> str:
    """Insert ``config.rename_prefix`` before every renderer class token in *text*."""
    if not config.rename_prefix:
        return text
    replacement = config.rename_prefix + config.class_prefix
    return class_token_pattern(config.class_prefix).sub(lambda _m: replacement, text)


class RenameClassesTransform:
    """Rename renderer class names across the whole document.

    Runs over both regions so that already scoped selectors and the body's
    ``class="..."`` attributes stay in step.  The identifier is renamed with
    the same rule in case it happens to carry the class prefix.
    """

    def apply(self, document: MarkupDocument, config: ScopeConfig) -> MarkupDocument:
        if not config.rename_prefix:
            return document
        return replace(
            document,
            head=rename_classes(document.head, config),
            body=rename_classes(document.body, config),
            identifier=rename_classes(document.identifier, config),
        )
