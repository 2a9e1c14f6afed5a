from __future__ import annotations

from collections.abc import Iterable

from ._components import Current, Parent, PathComponent, Segment


def collapse(components: Iterable[PathComponent], is_absolute: bool) -> list[PathComponent]:
    """Reduce a decomposed path to its shortest lexically equivalent form.

    ``Current`` markers are dropped and each ``Parent`` cancels the
    ``Segment`` before it.  A ``Parent`` that has nothing to cancel is
    discarded for absolute paths (there is nothing above the root) and kept
    as a pending ``..`` for relative ones.  Pending ``..`` markers never
    cancel each other, so ``a/../../b`` becomes ``../b`` while ``../../b``
    stays as it is.

    The function is total: every input, including an empty one, produces a
    list and nothing is raised.
    """
    stack: list[PathComponent] = []
    for component in components:
        if isinstance(component, Current):
            continue
        if not isinstance(component, Parent):
            # Prefix, Root and Segment
            stack.append(component)
            continue

        top = stack[-1] if stack else None
        if isinstance(top, Segment):
            stack.pop()
        elif not is_absolute:
            # top is an anchor, a pending "..", or nothing at all
            stack.append(Parent())
    return stack
