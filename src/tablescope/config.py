from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScopeConfig:
    class_prefix: str = "gt_"  # renderer class names, separator included
    rename_prefix: str = "new_"  # empty disables renaming
    root_class: str = "gt_table"
    global_selector: str = "html"
    disable_host_processing: bool = False
    reset_container: bool = False
    reset_class: str = "tablescope-reset"

    def __post_init__(self) -> None:
        for name in ("class_prefix", "root_class", "global_selector"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} cannot be empty")
        if self.reset_container and not self.reset_class.strip():
            raise ValueError("reset_class cannot be empty when reset_container is set")
