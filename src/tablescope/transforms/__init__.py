from tablescope.transforms.base import Transform
from tablescope.transforms.host import DisableHostProcessingTransform
from tablescope.transforms.rename import RenameClassesTransform
from tablescope.transforms.scope import ScopeSelectorsTransform

# Order matters: renaming must see the selectors after they were scoped.
BUILTIN_TRANSFORMS: list[Transform] = [
    ScopeSelectorsTransform(),
    RenameClassesTransform(),
    DisableHostProcessingTransform(),
]


def apply_transforms(document, config, custom_transforms=None):
    """Apply all built-in transforms (and any custom ones) to *document*."""
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        document = t.apply(document, config)
    return document
