"""Host-processing transform: opts the table out of the host's table restyling."""

from __future__ import annotations

from dataclasses import replace

from tablescope.config import ScopeConfig
from tablescope.model.document import MarkupDocument

HOST_PROCESSING_ATTR = "data-quarto-disable-processing"


class DisableHostProcessingTransform:
    """Flip ``data-quarto-disable-processing="false"`` to ``"true"``.

    Only applied when ``config.disable_host_processing`` is set.
    """

    def apply(self, document: MarkupDocument, config: ScopeConfig) -> MarkupDocument:
        if not config.disable_host_processing:
            return document
        old = f'{HOST_PROCESSING_ATTR}="false"'
        new = f'{HOST_PROCESSING_ATTR}="true"'
        return replace(
            document,
            head=document.head.replace(old, new),
            body=document.body.replace(old, new),
        )
